"""Stage progress tracking for CLI commands."""

from typing import List, Optional

import click


class ProgressTracker:
    """Prints ``[n/total] stage`` lines as a command moves through stages.

    Attributes:
        stages: Stage names in execution order
        current_stage: Index of the stage in progress (0-based)
    """

    def __init__(self, stages: List[str]):
        self.stages = stages
        self.current_stage = 0

    @property
    def total_stages(self) -> int:
        return len(self.stages)

    def get_current_message(self) -> str:
        if self.current_stage < self.total_stages:
            stage_name = self.stages[self.current_stage]
            return f"[{self.current_stage + 1}/{self.total_stages}] {stage_name}"
        return f"[{self.total_stages}/{self.total_stages}] Complete"

    def start(self):
        """Echo the message of the stage about to run."""
        click.echo(self.get_current_message())

    def advance(self, message: Optional[str] = None):
        """Finish the current stage, echoing an optional detail line."""
        if message:
            click.echo(f"  {message}")
        self.current_stage += 1

    def is_complete(self) -> bool:
        return self.current_stage >= self.total_stages
