from fastapi import APIRouter
from routers.admin_router import admin_router
from routers.auth_router import auth_router
from routers.service_router import service_router
from routers.user_router import user_router

router = APIRouter(
    prefix='/api'
)

router.include_router(auth_router)
router.include_router(user_router)
router.include_router(admin_router)
router.include_router(service_router)
