# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Protocol

from mooring.request import PreparedRequest, Response


class TargetBackend(Protocol):

    async def send(
        self,
        request: PreparedRequest,
    ) -> Response: ...


__all__ = ["TargetBackend"]
