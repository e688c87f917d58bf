from linefish.workflows.audit import run_artifact_audit
from linefish.workflows.tidy_contract import run_tidy_contract

__all__ = [
    "run_tidy_contract",
    "run_artifact_audit",
]
