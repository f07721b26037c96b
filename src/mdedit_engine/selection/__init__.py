"""Selection snapshots and the per-editor selection tracker."""

from .models import SelectionInfo, SelectionRange
from .tracker import SelectionTracker

__all__ = ["SelectionInfo", "SelectionRange", "SelectionTracker"]
