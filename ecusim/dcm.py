"""Diagnostic communication manager: answers diagnostic requests."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from ecusim.dem import DemError, DiagnosticEventManager

logger = logging.getLogger(__name__)

_DATA_LIMIT = 49


class DiagnosticService(enum.IntEnum):
    """Diagnostic service identifiers understood by the manager."""

    DIAGNOSTIC_SESSION_CONTROL = 0x10
    ECU_RESET = 0x11
    CLEAR_DTC = 0x14
    READ_DTC = 0x19


@dataclass
class DiagnosticRequest:
    """A diagnostic request from a tester."""

    service_id: int
    data: str = ""

    def __post_init__(self) -> None:
        self.data = self.data[:_DATA_LIMIT]


_ACKNOWLEDGEMENTS = {
    DiagnosticService.DIAGNOSTIC_SESSION_CONTROL: "Session Control Acknowledged",
    DiagnosticService.ECU_RESET: "ECU Reset Acknowledged",
    DiagnosticService.READ_DTC: "Read DTC Acknowledged",
    DiagnosticService.CLEAR_DTC: "Clear DTC Acknowledged",
}


class DiagnosticCommunicationManager:
    """Dispatches diagnostic requests and records the responses sent."""

    def __init__(self, dem: DiagnosticEventManager) -> None:
        self.dem = dem
        self.sent: list[str] = []
        logger.info("Diagnostic Communication Manager (DCM) Initialized.")

    def process_request(self, request: DiagnosticRequest) -> str:
        """Handle a request and return the response text sent back."""
        logger.info(
            "Received diagnostic request. Service ID: 0x%x", request.service_id
        )
        try:
            service = DiagnosticService(request.service_id)
        except ValueError:
            logger.info("Unknown diagnostic service ID: 0x%x", request.service_id)
            response = "Unknown Service ID"
            self.send_response(request.service_id, response)
            return response

        response = _ACKNOWLEDGEMENTS[service]
        self.send_response(service, response)
        if service is DiagnosticService.READ_DTC:
            logger.info("%s", self.dem.format_event_list())
        elif service is DiagnosticService.CLEAR_DTC:
            for event_id in range(self.dem.capacity):
                try:
                    self.dem.clear_error(event_id)
                except DemError:
                    logger.info("Event ID %d not found.", event_id)
        return response

    def send_response(self, service_id: int, response: str) -> str:
        """Send a response to the tester; return the line sent."""
        line = f"Sending response to Service ID: 0x{int(service_id):x} - {response}"
        self.sent.append(line)
        logger.info("%s", line)
        return line