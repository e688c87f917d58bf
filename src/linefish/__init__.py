from linefish.pipeline import run_01_tidy_and_write, run_02_artifact_audit

__all__ = [
    "run_01_tidy_and_write",
    "run_02_artifact_audit",
]
