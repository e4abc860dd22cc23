"""Run policy configuration dataclass."""

import argparse
from dataclasses import dataclass
from enum import Enum


class CleanupPolicy(str, Enum):
    """Which created resources to delete at the end of a run."""

    ALL = "all"
    VM_ONLY = "vm-only"
    NONE = "none"


@dataclass
class RunPolicy:
    cleanup: CleanupPolicy = CleanupPolicy.ALL
    with_storage: bool = False
    list_operations: bool = False
    strict: bool = False

    @staticmethod
    def from_args(args: argparse.Namespace) -> "RunPolicy":
        return RunPolicy(
            cleanup=CleanupPolicy(args.cleanup),
            with_storage=args.with_storage,
            list_operations=args.list_operations,
            strict=args.strict,
        )

    def to_dict(self) -> dict[str, str | bool]:
        return {
            "cleanup": self.cleanup.value,
            "withStorage": self.with_storage,
            "listOperations": self.list_operations,
            "strict": self.strict,
        }
