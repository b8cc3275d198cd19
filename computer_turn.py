from dataclasses import dataclass
from typing import Optional


@dataclass
class ComputerTurn:
    # When the pending reply becomes due; None means nothing is scheduled.
    due_time: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self.due_time is not None

    def schedule(self, now: float, delay: float):
        # Only one reply can be pending at a time.
        self.due_time = now + delay

    def cancel(self):
        self.due_time = None

    def poll(self, now: float) -> bool:
        """
        Returns True once, on the first frame at or after the due time.
        """
        if self.due_time is None:
            return False

        if now >= self.due_time:
            self.due_time = None
            return True
        return False
