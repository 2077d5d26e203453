from pydantic import BaseModel

from placement_portal.schemas.common import CollegeSummary


class CollegeResponse(CollegeSummary):
    pass


class CollegeStats(BaseModel):
    total_students: int
    placed_students: int
    pending_approvals: int
    active_jobs: int
