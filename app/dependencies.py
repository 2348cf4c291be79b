# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The Supabase client, ObjectStorage and Settings are built once by the app
# factory and parked on app.state; every route reaches them through the
# functions below rather than through module globals.
# =============================================================================

import json
from typing import Annotated, Any

from fastapi import Depends, Request, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile
from supabase import Client

from app.config import Settings
from core.services import (
    CandidateService,
    ContentService,
    JobApplicationService,
    JobService,
    ObjectStorage,
    ServiceRequestService,
    TemplateService,
    TrainingRequestService,
)


# =============================================================================
# Application Handles
# =============================================================================

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Client:
    """Get the Supabase client built at startup."""
    return request.app.state.db


def get_object_storage(request: Request) -> ObjectStorage:
    return request.app.state.object_storage


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
DbDep = Annotated[Client, Depends(get_db)]
ObjectStorageDep = Annotated[ObjectStorage, Depends(get_object_storage)]


# =============================================================================
# Table Services
# =============================================================================

def get_service_request_service(db: DbDep) -> ServiceRequestService:
    return ServiceRequestService(db)


def get_content_service(db: DbDep) -> ContentService:
    return ContentService(db)


def get_candidate_service(db: DbDep) -> CandidateService:
    return CandidateService(db)


def get_template_service(db: DbDep) -> TemplateService:
    return TemplateService(db)


def get_job_service(db: DbDep) -> JobService:
    return JobService(db)


def get_job_application_service(db: DbDep) -> JobApplicationService:
    return JobApplicationService(db)


def get_training_request_service(db: DbDep) -> TrainingRequestService:
    return TrainingRequestService(db)


ServiceRequestServiceDep = Annotated[ServiceRequestService, Depends(get_service_request_service)]
ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]
CandidateServiceDep = Annotated[CandidateService, Depends(get_candidate_service)]
TemplateServiceDep = Annotated[TemplateService, Depends(get_template_service)]
JobServiceDep = Annotated[JobService, Depends(get_job_service)]
JobApplicationServiceDep = Annotated[JobApplicationService, Depends(get_job_application_service)]
TrainingRequestServiceDep = Annotated[TrainingRequestService, Depends(get_training_request_service)]


# =============================================================================
# Request Bodies
# =============================================================================
# Bodies are read by these dependencies rather than declared as pydantic
# parameters, so they are only touched after the admin gate has passed and
# are checked with core.validation instead of raising.

async def json_body(request: Request) -> Any:
    """Raw decoded JSON body, or None if it is missing or malformed."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


class FormPayload:
    """A multipart body split into its text fields and file parts."""

    def __init__(self, fields: dict[str, str], files: dict[str, UploadFile]):
        self.fields = fields
        self.files = files

    def first_file(self, *names: str) -> UploadFile | None:
        """First non-empty file part among `names`, in order."""
        for name in names:
            upload = self.files.get(name)
            if upload is not None and upload.filename:
                return upload
        return None


async def form_body(request: Request) -> FormPayload:
    form = await request.form()
    fields: dict[str, str] = {}
    files: dict[str, UploadFile] = {}
    for key, value in form.multi_items():
        if isinstance(value, StarletteUploadFile):
            files.setdefault(key, value)
        else:
            fields.setdefault(key, value)
    return FormPayload(fields, files)


JsonBody = Annotated[Any, Depends(json_body)]
FormBody = Annotated[FormPayload, Depends(form_body)]
