"""HoloLens perception simulation recording: status, start and stop."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from ..device import DeviceInfo, require_hololens
from ..errors import RecordingError
from ..schemas import RecordingStatus, StartRecordingOptions, StopRecordingError
from .network import PortalSession

LOGGER = logging.getLogger("holoportal.recording")

RECORDING_API_ROOT = "api/holographic/simulation/recording/"
RECORDING_STATUS_API = RECORDING_API_ROOT + "status"
START_RECORDING_API = RECORDING_API_ROOT + "start"
STOP_RECORDING_API = RECORDING_API_ROOT + "stop"


def try_parse_error_shape(body: bytes) -> Optional[str]:
    """Return the ``Reason`` of a stop error document, or None for anything else.

    Any decode failure means the body is not an error document. That includes
    malformed JSON, binary data, and valid JSON of another shape such as ``{}``.
    """
    try:
        return StopRecordingError.model_validate_json(body).reason
    except (ValidationError, ValueError):
        return None


class RecordingClient:
    """Drive perception simulation recordings on a HoloLens through the device portal."""

    def __init__(self, session: PortalSession, device: DeviceInfo) -> None:
        self.session = session
        self.device = device

    async def get_recording_status(self) -> bool:
        require_hololens(self.device)
        status = await self.session.get_model(RECORDING_STATUS_API, RecordingStatus)
        return status.is_recording

    async def start_recording(
        self,
        name: str,
        options: StartRecordingOptions | None = None,
    ) -> None:
        require_hololens(self.device)
        options = options or StartRecordingOptions()
        LOGGER.info("Starting perception simulation recording %r", name)
        await self.session.post(START_RECORDING_API, options.to_query(name))

    async def stop_recording(self) -> Optional[bytes]:
        """Stop the running recording and return its data.

        Returns None when the device sent back nothing. Raises RecordingError
        when the device answered with an error document instead of data.
        """
        require_hololens(self.device)
        async with self.session.open_stream(STOP_RECORDING_API) as stream:
            body = await stream.aread()
        if not body:
            LOGGER.info("Recording stopped; no data returned")
            return None

        reason = try_parse_error_shape(body)
        if reason is not None:
            LOGGER.warning("Stop recording rejected: %s", reason)
            raise RecordingError(reason)

        LOGGER.info("Recording stopped; received %d bytes", len(body))
        return body
