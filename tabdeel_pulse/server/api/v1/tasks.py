"""
Task Endpoints.

Tasks are ordered by deadline, soonest first, then newest first.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status

from tabdeel_pulse.core.database.entities import Task, User
from tabdeel_pulse.core.database.repositories import TaskRepository
from tabdeel_pulse.core.models.io import PersonRef, TaskCompletionUpdate, TaskCreate, TaskRead
from tabdeel_pulse.server.services.deps import SessionDep

router = APIRouter()


def _to_read(task: Task, assignee: Optional[User]) -> TaskRead:
    read = TaskRead.model_validate(task)
    if assignee is not None:
        read.assigned_to = PersonRef(name=assignee.name, avatar_url=assignee.avatar_url)
    return read


async def _get_or_404(repo: TaskRepository, task_id: int) -> Task:
    task = await repo.get_by_id(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task {task_id} not found")
    return task


async def _read_with_assignee(repo: TaskRepository, task: Task) -> TaskRead:
    assignee = None
    if task.assigned_to_user_id is not None:
        assignee = await repo.session.get(User, task.assigned_to_user_id)
    return _to_read(task, assignee)


@router.get("", response_model=list[TaskRead], summary="List Tasks")
async def list_tasks(session: SessionDep) -> list[TaskRead]:
    return [_to_read(task, user) for task, user in await TaskRepository(session).list_with_assignees()]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED, summary="Create Task")
async def create_task(body: TaskCreate, session: SessionDep) -> TaskRead:
    repo = TaskRepository(session)
    task = await repo.create(
        Task(
            name=body.name,
            description=body.description,
            deadline=body.deadline,
            assigned_to_user_id=body.assigned_to_user_id,
            is_completed=False,
        )
    )
    return await _read_with_assignee(repo, task)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Set Task Completion",
    responses={404: {"description": "Task not found"}},
)
async def set_task_completion(task_id: int, body: TaskCompletionUpdate, session: SessionDep) -> TaskRead:
    repo = TaskRepository(session)
    task = await repo.apply_changes(await _get_or_404(repo, task_id), {"is_completed": body.is_completed})
    return await _read_with_assignee(repo, task)


@router.put(
    "/{task_id}/toggle",
    response_model=TaskRead,
    summary="Toggle Task Completion",
    responses={404: {"description": "Task not found"}},
)
async def toggle_task(task_id: int, session: SessionDep) -> TaskRead:
    repo = TaskRepository(session)
    task = await repo.toggle(await _get_or_404(repo, task_id))
    return await _read_with_assignee(repo, task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Task",
    responses={404: {"description": "Task not found"}},
)
async def delete_task(task_id: int, session: SessionDep) -> None:
    if not await TaskRepository(session).delete(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task {task_id} not found")
