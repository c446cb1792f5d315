"""
Orbital Layout Demo

Demonstrates:
- Gap-based angle placement for new subtasks
- Radii closing ranks as subtasks complete
- Priority belt sliding inward, then celebrating
- Manual belt moves
"""

from pathlib import Path
import logging
import sys

# Add packages to path
repo_root = Path(__file__).parent
sys.path.insert(0, str(repo_root / "packages" / "orbit"))

from orbit import (
    OrbitConfig,
    ParentTask,
    add_subtask,
    enable_belt,
    marker_radius,
    set_completed,
    shift_belt,
    validate_orbital_invariants,
    log_validation_results
)


def show(title, result, config):
    print(f"\n[{title}]")
    for st in result.task.subtasks:
        state = "done" if st.completed else "    "
        print(f"  {state} {st.id:<8} angle={st.assigned_angle:7.1f}  radius={st.assigned_radius:6.1f}")
    belt = result.belt
    if belt.is_visible:
        print(f"  belt: {belt.status.value} ring={belt.ring} radius={marker_radius(belt.ring, config):.1f}")
    else:
        print("  belt: none")


def demo_orbital_layout():
    """Walk one parent task through a priority session."""
    config = OrbitConfig.from_env()

    print("\n" + "=" * 70)
    print("Orbital Layout Demo")
    print("=" * 70)

    task = ParentTask(id="demo", title="Launch newsletter")
    for subtask_id in ("outline", "draft", "edit"):
        result = add_subtask(task, subtask_id, subtask_id.title(), config)
        task = result.task
    show("Three subtasks", result, config)

    result = enable_belt(task, config)
    show("Belt around everything", result, config)

    result = add_subtask(result.task, "publish", "Publish", config)
    show("New subtask lands outside the belt", result, config)

    for subtask_id in ("outline", "draft", "edit"):
        result = set_completed(result.task, subtask_id, True, config)
        show(f"Completed {subtask_id}", result, config)

    result = set_completed(result.task, "edit", False, config)
    result = shift_belt(result.task, "outward", config)
    show("Reopened edit, belt moved outward", result, config)

    task = result.task
    report = validate_orbital_invariants(task.subtasks, task.id, task.belt_ring, task.belt_target_ids)
    log_validation_results(report, task.title)
    print(f"\nInvariants valid: {report.is_valid}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo_orbital_layout()
