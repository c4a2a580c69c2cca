"""Testing fakes – in-memory doubles."""
from mp_reframe.testing.fakes.recorder import Observation, RecordingMiddleware

__all__ = ["Observation", "RecordingMiddleware"]
