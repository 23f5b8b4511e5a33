"""Mounts the practice, audio, report and metadata routers under one API router."""

from fastapi import APIRouter

from interview_coach.api.endpoints import audio, metadata, practice, report

api_router = APIRouter()

for module, prefix, tag in (
    (practice, "/practice", "Practice"),
    (audio, "/audio", "Audio"),
    (report, "/report", "Report"),
    (metadata, "/metadata", "Metadata"),
):
    api_router.include_router(module.router, prefix=prefix, tags=[tag])
