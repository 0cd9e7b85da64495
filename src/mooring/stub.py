# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from mooring.target import TargetType


@dataclass(frozen=True)
class NeverStub:
    """Send the request through the backend"""


@dataclass(frozen=True)
class ImmediateStub:
    """Answer with the target sample data right away"""


@dataclass(frozen=True)
class DelayedStub:
    """Answer with the target sample data after `seconds`"""

    seconds: float


StubBehavior = NeverStub | ImmediateStub | DelayedStub

StubClosure = Callable[["TargetType"], StubBehavior]


def never_stub(target: "TargetType") -> StubBehavior:
    return NeverStub()


def immediately_stub(target: "TargetType") -> StubBehavior:
    return ImmediateStub()


def delayed_stub(seconds: float) -> StubClosure:

    def stub_closure(target: "TargetType") -> StubBehavior:
        return DelayedStub(seconds)

    return stub_closure


__all__ = [
    "NeverStub",
    "ImmediateStub",
    "DelayedStub",
    "StubBehavior",
    "StubClosure",
    "never_stub",
    "immediately_stub",
    "delayed_stub",
]
