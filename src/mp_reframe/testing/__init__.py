"""Testing support – fakes for exercising stores and events."""

from mp_reframe.testing.fakes import Observation, RecordingMiddleware

__all__ = ["Observation", "RecordingMiddleware"]
