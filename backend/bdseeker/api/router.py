from fastapi import APIRouter

from bdseeker.api.routes import admin, auth, companies, developers, health, jobs, reports

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])  # GET /
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])  # POST /register, /login, /logout; GET /me
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])  # profiles, ratings, reviews
api_router.include_router(developers.router, prefix="/developers", tags=["developers"])  # GET /, POST /, GET /{id}
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])  # job posts and comments
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])  # POST /
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])  # moderation and user management
