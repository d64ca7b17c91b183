from fastapi import APIRouter

from .assessments import assessment_router
from .applications import application_router
from .loans import loan_router
from .profiles import profile_router
from .stats import stats_router

router = APIRouter()

router.include_router(profile_router, tags=["Profiles"])
router.include_router(application_router, tags=["Applications"])
router.include_router(loan_router, tags=["Loans"])
router.include_router(assessment_router, tags=["Assessments"])
router.include_router(stats_router, tags=["Stats"])
