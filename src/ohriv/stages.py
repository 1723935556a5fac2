"""Default pipeline stages and ordering rules."""

from __future__ import annotations

from typing import Iterable

import structlog

from .schemas import Stage

DEFAULT_STAGES: tuple[Stage, ...] = (
    Stage(
        id="recruiter_screen",
        name="Recruiter Screen",
        description="Initial screening by a recruiter.",
        color="#A0AEC0",
        icon="📞",
        order=1,
        is_system=True,
        can_reorder=False,
        questions_enabled=True,
    ),
    Stage(
        id="hiring_manager_interview",
        name="Hiring Manager Interview",
        description="Interview with the hiring manager.",
        color="#F6E05E",
        icon="👩‍💼",
        order=2,
        is_system=True,
        can_reorder=True,
        questions_enabled=True,
    ),
    Stage(
        id="final_interview",
        name="Final Interview",
        description="Final round interview with the team.",
        color="#68D391",
        icon="🏁",
        order=3,
        is_system=True,
        can_reorder=True,
        questions_enabled=True,
    ),
)


class StageOrderError(ValueError):
    """Raised when stage ``order`` values collide."""


class StageLockedError(ValueError):
    """Raised when a locked or system stage would be moved or removed."""


class StagePipeline:
    """Ordered stage list with contiguous ``order`` numbering.

    Incoming ``order`` values only decide the sequence; the pipeline
    renumbers them 1..n on construction.

    Stages are addressed by ``id`` and fall back to ``name`` when the stage
    has not been assigned an id yet.
    """

    def __init__(self, stages: Iterable[Stage] = DEFAULT_STAGES) -> None:
        ordered = sorted(stages, key=lambda stage: stage.order)
        seen: dict[int | float, str] = {}
        for stage in ordered:
            if stage.order in seen:
                raise StageOrderError(
                    f"Stages {seen[stage.order]!r} and {stage.key!r} share order {stage.order}"
                )
            seen[stage.order] = stage.key
        self._stages = ordered
        self._renumber()
        self._logger = structlog.get_logger(__name__)

    @property
    def stages(self) -> list[Stage]:
        return list(self._stages)

    def keys(self) -> list[str]:
        return [stage.key for stage in self._stages]

    def get(self, key: str) -> Stage:
        return self._stages[self._index(key)]

    def add(self, stage: Stage) -> Stage:
        if stage.key in self.keys():
            raise StageOrderError(f"Stage {stage.key!r} already exists")
        appended = stage.model_copy(update={"order": len(self._stages) + 1})
        self._stages.append(appended)
        self._logger.info("stages.added", stage=appended.key, order=appended.order)
        return appended

    def remove(self, key: str) -> Stage:
        index = self._index(key)
        stage = self._stages[index]
        if stage.is_system:
            raise StageLockedError(f"System stage {key!r} cannot be removed")
        del self._stages[index]
        self._renumber()
        self._logger.info("stages.removed", stage=key)
        return stage

    def move(self, key: str, new_index: int) -> list[Stage]:
        """Move a stage to ``new_index`` (0-based) and renumber the pipeline."""
        old_index = self._index(key)
        if not 0 <= new_index < len(self._stages):
            raise IndexError(f"Stage position {new_index} out of range")
        stage = self._stages[old_index]
        if not stage.reorderable:
            raise StageLockedError(f"Stage {key!r} cannot be reordered")
        occupant = self._stages[new_index]
        if occupant is not stage and not occupant.reorderable:
            raise StageLockedError(
                f"Position {new_index} is held by locked stage {occupant.key!r}"
            )
        if old_index == new_index:
            return self.stages
        self._stages.insert(new_index, self._stages.pop(old_index))
        self._renumber()
        self._logger.info("stages.moved", stage=key, from_index=old_index, to_index=new_index)
        return self.stages

    def _index(self, key: str) -> int:
        for index, stage in enumerate(self._stages):
            if stage.key == key:
                return index
        raise KeyError(f"Unknown stage: {key!r}")

    def _renumber(self) -> None:
        self._stages = [
            stage if stage.order == position else stage.model_copy(update={"order": position})
            for position, stage in enumerate(self._stages, start=1)
        ]
