"""Workflow runner - runs node steps in sequence and records their results."""

from datetime import datetime, timezone

from paapi_sdk.logging import get_logger

from core.domain.enums.execution_status import ExecutionStatus

from .models import ExecutionContext, NodeExecutionData, StepResult, WorkflowResult
from .workflow import WorkflowDefinition, WorkflowStep


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WorkflowRunner:
    """Runs workflows the way the host does: one node at a time, stop on failure."""

    def __init__(self) -> None:
        self._logger = get_logger("orchestration.runner")

    async def run(
        self, workflow: WorkflowDefinition, items: list[NodeExecutionData] | None = None
    ) -> WorkflowResult:
        """Run a workflow.

        Args:
            workflow: WorkflowDefinition to run
            items: Input items for the first step (defaults to one empty item)

        Returns:
            WorkflowResult with per-step details
        """
        started_at = utc_now()
        current_items = items if items is not None else [NodeExecutionData(json={})]

        self._logger.info(
            f"workflow_starting name={workflow.name} step_count={len(workflow.steps)} "
            f"item_count={len(current_items)}"
        )

        step_results: list[StepResult] = []
        workflow_succeeded = True

        for step in workflow.steps:
            step_result = await self._execute_step(step, current_items)
            step_results.append(step_result)

            if not step_result.success:
                # Node failed - the rest of the workflow does not run
                workflow_succeeded = False
                self._logger.warning(
                    f"workflow_step_failed name={workflow.name} step={step.name} "
                    f"error={step_result.error}"
                )
                break

            current_items = step_result.output[0] if step_result.output else []

        finished_at = utc_now()
        final_status = ExecutionStatus.SUCCESS if workflow_succeeded else ExecutionStatus.FAILED

        self._logger.info(
            f"workflow_finished name={workflow.name} status={final_status.value} "
            f"duration_ms={int((finished_at - started_at).total_seconds() * 1000)}"
        )

        return WorkflowResult(
            name=workflow.name,
            status=final_status,
            started_at=started_at,
            finished_at=finished_at,
            steps=step_results,
        )

    async def _execute_step(
        self, step: WorkflowStep, items: list[NodeExecutionData]
    ) -> StepResult:
        """Execute a single node. No retries: a raised error fails the step."""
        step_started_at = utc_now()
        context = ExecutionContext(
            description=step.node.description,
            items=items,
            parameters=step.parameters,
            credentials=step.credentials,
            started_at=step_started_at,
        )

        try:
            output = await step.node.execute(context)
        except Exception as exc:
            duration_ms = int((utc_now() - step_started_at).total_seconds() * 1000)
            return StepResult(
                name=step.name,
                success=False,
                duration_ms=duration_ms,
                error=str(exc) or "Unknown error",
                exception=exc,
            )

        duration_ms = int((utc_now() - step_started_at).total_seconds() * 1000)
        return StepResult(
            name=step.name,
            success=True,
            duration_ms=duration_ms,
            output=output,
        )
