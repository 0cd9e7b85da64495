from opentelemetry import trace
from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from mooring.request import PreparedRequest
from mooring.target import TargetType


class TracedRequestPlugin:
    """Propagates the current trace context and baggage through request headers"""

    def prepare(self, request: PreparedRequest, target: TargetType) -> PreparedRequest:

        span = trace.get_current_span()

        if span.get_span_context().is_valid:
            headers: dict[str, str] = {}
            W3CBaggagePropagator().inject(headers)
            TraceContextTextMapPropagator().inject(headers)

            for key, value in headers.items():
                request.set_header(key, value)

        return request
