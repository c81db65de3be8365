"""Test-support routes, mounted only outside production."""

from logging import getLogger

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_204_NO_CONTENT

from blogapp.configs import file_logger
from blogapp.db import clear_all_data
from blogapp.dependencies import SessionDep

router = APIRouter(prefix="/testing", tags=["Testing"])

logger = file_logger(getLogger(__name__))


@router.delete(
    "/all-data",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Wipe all data",
    description="Delete every user, blog and post.",
    operation_id="testing_wipe",
)
async def delete_all_data(session: SessionDep) -> None:
    logger.warning("Wiping all data")
    await clear_all_data(session)
