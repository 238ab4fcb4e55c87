import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from config import LOG_LEVEL
from db import models
from db.database import engine
from db.db_uploader import init_data
from routers import api
from schemas.base import HealthOutput

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info('Application starting up...')
    models.Base.metadata.create_all(bind=engine)
    init_data()
    yield
    logger.info('Application shutting down...')


description = """
Salon appointment booking API.
Customers book appointments and read notifications, administrators decide appointments and manage users.

## Auth

* **Register user / admin**
* **Login**

## User
* **Book appointment**
* **Dashboard**

## Admin
* **List users**
* **Grant access**
* **Approve / reject appointment**
* **Pending appointments**
* **Create service**

## Services
* **List services**
"""
tags_metadata = [
    {
        'name': 'Auth',
        'description': 'Registration and **login**. Login returns the bearer token used by every other API'
    },
    {
        'name': 'User',
        'description': 'Appointment booking and the dashboard of the logged in user'
    },
    {
        'name': 'Admin',
        'description': 'Administrator only APIs'
    },
    {
        'name': 'Services',
        'description': 'Service catalog'
    }
]

app = FastAPI(
    title='Salon Booking API',
    description=description,
    summary='Salon appointment booking system',
    openapi_tags=tags_metadata,
    lifespan=lifespan
)

app.include_router(api.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f'Unhandled error on {request.method} {request.url.path}')
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': 'The request could not be processed'}
    )


@app.get('/', response_model=HealthOutput, name='Health check')
def read_root():
    return HealthOutput(status='ok')


if __name__ == '__main__':
    uvicorn.run('main:app')
