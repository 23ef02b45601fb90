from pydantic import BaseModel


class StatsOut(BaseModel):
    total_users: int
    total_developers: int
    total_companies: int
    total_jobs: int
    total_reports: int
    pending_reviews: int
    pending_comments: int
