"""
Service Job Endpoints.

Jobs can be filtered by status and priority and sorted by priority (High
before Medium before Low) or title. Comments live under ``/api/jobs/{id}``.
"""

from enum import Enum
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from tabdeel_pulse.core.database.entities import JobComment, ServiceJob, User
from tabdeel_pulse.core.database.repositories import JobCommentRepository, ServiceJobRepository
from tabdeel_pulse.core.formatting import time_ago
from tabdeel_pulse.core.logging_config import get_logger
from tabdeel_pulse.core.models.domain import JobPriority, JobStatus
from tabdeel_pulse.core.models.io import (
    JobCommentCreate,
    JobCommentRead,
    PersonRef,
    ServiceJobCreate,
    ServiceJobRead,
    ServiceJobUpdate,
)
from tabdeel_pulse.server.services.deps import SessionDep
from tabdeel_pulse.server.services.profiles import UNKNOWN_USER_NAME

logger = get_logger(__name__)

router = APIRouter()
comments_router = APIRouter()


class JobSortKey(str, Enum):
    PRIORITY = "priority"
    TITLE = "title"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def _to_read(job: ServiceJob) -> ServiceJobRead:
    return ServiceJobRead(
        id=job.id,  # type: ignore[arg-type]
        title=job.title,
        project=job.project,
        technician=PersonRef(name=job.technician_name, avatar_url=job.technician_avatar_url),
        status=job.status,
        priority=job.priority,
    )


def _priority_rank(job: ServiceJob) -> int:
    try:
        return JobPriority(job.priority).rank
    except ValueError:
        return len(JobPriority) + 1


async def _get_job_or_404(repo: ServiceJobRepository, job_id: int) -> ServiceJob:
    job = await repo.get_by_id(job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Service job {job_id} not found")
    return job


@router.get(
    "",
    response_model=list[ServiceJobRead],
    summary="List Service Jobs",
    description="Service jobs, newest first unless a sort key is given. Optionally filtered by status and priority.",
)
async def list_service_jobs(
    session: SessionDep,
    status_filter: Optional[JobStatus] = Query(default=None, alias="status"),
    priority: Optional[JobPriority] = None,
    sort: Optional[JobSortKey] = None,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[ServiceJobRead]:
    """
    List service jobs.

    - **status**: Only jobs in this status.
    - **priority**: Only jobs with this priority.
    - **sort**: ``priority`` (High first when ascending) or ``title``.
    - **direction**: ``ascending`` (default) or ``descending``.
    """
    filters = {
        "status": status_filter.value if status_filter else None,
        "priority": priority.value if priority else None,
    }
    jobs = await ServiceJobRepository(session).list(filters=filters)
    if sort is not None:
        reverse = direction is SortDirection.DESCENDING
        key = _priority_rank if sort is JobSortKey.PRIORITY else (lambda job: job.title.lower())
        jobs = sorted(jobs, key=key, reverse=reverse)
    return [_to_read(job) for job in jobs]


@router.post(
    "",
    response_model=ServiceJobRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Service Job",
    description="Create a service job assigned to a technician. New jobs start as Assigned.",
)
async def create_service_job(body: ServiceJobCreate, session: SessionDep) -> ServiceJobRead:
    job = await ServiceJobRepository(session).create(
        ServiceJob(
            title=body.title,
            project=body.project,
            technician_name=body.technician.name,
            technician_avatar_url=body.technician.avatar_url,
            status=JobStatus.ASSIGNED.value,
            priority=body.priority.value,
        )
    )
    logger.info(f"Service job {job.id} assigned to {job.technician_name}")
    return _to_read(job)


@router.patch(
    "/{job_id}",
    response_model=ServiceJobRead,
    summary="Update Service Job",
    description="Change the status and/or priority of a service job.",
    responses={404: {"description": "Service job not found"}},
)
async def update_service_job(job_id: int, body: ServiceJobUpdate, session: SessionDep) -> ServiceJobRead:
    repo = ServiceJobRepository(session)
    job = await _get_job_or_404(repo, job_id)
    changes = body.model_dump(mode="json", exclude_none=True)
    if changes:
        job = await repo.apply_changes(job, changes)
    return _to_read(job)


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Service Job",
    responses={404: {"description": "Service job not found"}},
)
async def delete_service_job(job_id: int, session: SessionDep) -> None:
    if not await ServiceJobRepository(session).delete(job_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Service job {job_id} not found")


def _comment_to_read(comment: JobComment, user: Optional[User]) -> JobCommentRead:
    author = (
        PersonRef(name=user.name, avatar_url=user.avatar_url)
        if user is not None
        else PersonRef(name=UNKNOWN_USER_NAME, avatar_url="")
    )
    return JobCommentRead(id=comment.id, user=author, text=comment.text, timestamp=time_ago(comment.created_at))  # type: ignore[arg-type]


@comments_router.get(
    "/{job_id}/comments",
    response_model=list[JobCommentRead],
    summary="List Job Comments",
    description="Comments on a service job, oldest first.",
    responses={404: {"description": "Service job not found"}},
)
async def list_job_comments(job_id: int, session: SessionDep) -> list[JobCommentRead]:
    await _get_job_or_404(ServiceJobRepository(session), job_id)
    rows = await JobCommentRepository(session).list_for_job(job_id)
    return [_comment_to_read(comment, user) for comment, user in rows]


@comments_router.post(
    "/{job_id}/comments",
    response_model=JobCommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Job Comment",
    responses={404: {"description": "Service job or user not found"}},
)
async def add_job_comment(job_id: int, body: JobCommentCreate, session: SessionDep) -> JobCommentRead:
    await _get_job_or_404(ServiceJobRepository(session), job_id)
    user = await session.get(User, body.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {body.user_id} not found")
    comment = await JobCommentRepository(session).create(JobComment(job_id=job_id, user_id=user.id, text=body.text))
    return _comment_to_read(comment, user)
