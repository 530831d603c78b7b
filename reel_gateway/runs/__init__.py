from .store import RunState, RunStatus, RunStatusStore, RunStep, StubRunStatusStore

__all__ = ["RunState", "RunStatus", "RunStatusStore", "RunStep", "StubRunStatusStore"]
