from fastapi import APIRouter

from gearguard.api.routes import auth, catalog, equipment, health, meta, requests, teams

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(health.router)

# Maintenance workflow
api_router.include_router(requests.router)
api_router.include_router(meta.router)

# Reference data
api_router.include_router(equipment.router)
api_router.include_router(teams.router)
api_router.include_router(catalog.router)
