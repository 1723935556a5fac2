from __future__ import annotations

import pytest

from ohriv.schemas import Stage
from ohriv.stages import DEFAULT_STAGES, StageLockedError, StageOrderError, StagePipeline


def custom_stage(name: str, order: int = 99, **overrides) -> Stage:
    return Stage(name=name, color="#6b7280", icon="📋", order=order, **overrides)


def test_default_pipeline_order():
    pipeline = StagePipeline()

    assert pipeline.keys() == ["recruiter_screen", "hiring_manager_interview", "final_interview"]
    assert [stage.order for stage in pipeline.stages] == [1, 2, 3]
    assert pipeline.get("recruiter_screen").can_reorder is False


def test_stages_sorted_by_order():
    pipeline = StagePipeline(
        [custom_stage("Offer", order=3), custom_stage("Screen", order=1), custom_stage("Panel", order=2)]
    )

    assert pipeline.keys() == ["Screen", "Panel", "Offer"]


def test_duplicate_order_rejected():
    with pytest.raises(StageOrderError):
        StagePipeline([custom_stage("A", order=1), custom_stage("B", order=1)])


def test_add_appends_with_next_order():
    pipeline = StagePipeline()

    added = pipeline.add(custom_stage("Take-home"))

    assert added.order == 4
    assert pipeline.keys()[-1] == "Take-home"


def test_sparse_orders_renumbered_on_construction():
    pipeline = StagePipeline([custom_stage("A", order=1), custom_stage("B", order=3)])

    assert [stage.order for stage in pipeline.stages] == [1, 2]

    added = pipeline.add(custom_stage("C"))

    assert added.order == 3
    assert [stage.order for stage in pipeline.stages] == [1, 2, 3]


def test_add_rejects_duplicate_key():
    pipeline = StagePipeline()

    with pytest.raises(StageOrderError):
        pipeline.add(custom_stage("Final Interview", id="final_interview"))


def test_system_stage_cannot_be_removed():
    pipeline = StagePipeline()

    with pytest.raises(StageLockedError):
        pipeline.remove("final_interview")


def test_remove_renumbers_remaining_stages():
    pipeline = StagePipeline()
    pipeline.add(custom_stage("Take-home"))
    pipeline.add(custom_stage("Reference Check"))

    pipeline.remove("Take-home")

    assert pipeline.keys()[-1] == "Reference Check"
    assert [stage.order for stage in pipeline.stages] == [1, 2, 3, 4]


def test_locked_stage_cannot_move():
    pipeline = StagePipeline()

    with pytest.raises(StageLockedError):
        pipeline.move("recruiter_screen", 2)


def test_cannot_move_into_locked_position():
    pipeline = StagePipeline()

    with pytest.raises(StageLockedError):
        pipeline.move("final_interview", 0)


def test_move_reorders_and_renumbers():
    pipeline = StagePipeline()
    pipeline.add(custom_stage("Take-home"))

    stages = pipeline.move("Take-home", 1)

    assert [stage.key for stage in stages] == [
        "recruiter_screen",
        "Take-home",
        "hiring_manager_interview",
        "final_interview",
    ]
    assert [stage.order for stage in stages] == [1, 2, 3, 4]


def test_move_out_of_range():
    pipeline = StagePipeline()

    with pytest.raises(IndexError):
        pipeline.move("final_interview", 5)


def test_unknown_stage_key():
    with pytest.raises(KeyError):
        StagePipeline().get("offer")


def test_pipeline_does_not_mutate_defaults():
    pipeline = StagePipeline()
    pipeline.add(custom_stage("Take-home"))
    pipeline.move("Take-home", 1)

    assert [stage.order for stage in DEFAULT_STAGES] == [1, 2, 3]
