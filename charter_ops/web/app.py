"""
FastAPI interface for charter operations
"""
from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
from datetime import datetime

from charter_ops import __version__
from charter_ops.config import config
from charter_ops.database.repository import CharterRepository
from charter_ops.models.schemas import (
    AssignCrewRequest, AssignmentStatusUpdate, CrewSelection, InterventionRequest,
    Phase, StatusUpdateRequest
)
from charter_ops.services.charter_phase import handle_phase_action, handle_phase_board, handle_status_update
from charter_ops.services.crew_assignment import (
    handle_assignment_status, handle_crew_assignment, handle_crew_board
)
from charter_ops.services.intervention import handle_intervention, handle_intervention_history
from charter_ops.utils.exceptions import (
    CharterOpsException, ConflictException, DataValidationException, NotFoundException
)
from charter_ops.utils.logger import get_service_logger

# Initialize FastAPI app
app = FastAPI(
    title="Charter Operations - Yacht Experience & Crew Management",
    description="Charter phase tracking, crew assignment and admin interventions",
    version=__version__
)

# Set up CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

web_logger = get_service_logger("web_interface")


def get_repository() -> CharterRepository:
    return CharterRepository()


def _status_code_for(error: CharterOpsException) -> int:
    if isinstance(error, DataValidationException):
        return 400
    if isinstance(error, NotFoundException):
        return 404
    if isinstance(error, ConflictException):
        return 409
    return 500


def _raise_http(error: CharterOpsException, endpoint: str):
    status_code = _status_code_for(error)
    web_logger.error("API error", endpoint=endpoint, status_code=status_code,
                     error_code=error.error_code, error=error.message)
    raise HTTPException(status_code=status_code, detail=error.message)


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "version": __version__,
        "config_valid": config.validate()
    }

# Yacht experience (charter phases)

@app.get("/api/admin/yacht-bookings")
def list_yacht_bookings(phase: Optional[Phase] = None, now: Optional[datetime] = None,
                        repository: CharterRepository = Depends(get_repository)):
    """All bookings, or only those in one phase tab"""
    try:
        if phase is None:
            return repository.list_bookings()
        board = handle_phase_board(repository, now)
        return next(view.bookings for view in board["phases"] if view.phase == phase)
    except CharterOpsException as e:
        _raise_http(e, "list_yacht_bookings")


@app.get("/api/admin/yacht-bookings/phases")
def phase_board(now: Optional[datetime] = None, repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_phase_board(repository, now)
    except CharterOpsException as e:
        _raise_http(e, "phase_board")


@app.put("/api/admin/yacht-bookings/{booking_id}/status")
def update_booking_status(booking_id: int, request: StatusUpdateRequest,
                          repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_status_update(repository, booking_id, request.status)
    except CharterOpsException as e:
        _raise_http(e, "update_booking_status")


@app.post("/api/admin/yacht-bookings/{booking_id}/phase-action")
def phase_action(booking_id: int, now: Optional[datetime] = None,
                 repository: CharterRepository = Depends(get_repository)):
    """Apply the booking's phase button (Confirm / Mark Active / Complete)"""
    try:
        return handle_phase_action(repository, booking_id, now)
    except CharterOpsException as e:
        _raise_http(e, "phase_action")


@app.post("/api/admin/yacht-bookings/{booking_id}/intervention", status_code=201)
def log_intervention(booking_id: int, request: InterventionRequest,
                     repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_intervention(repository, booking_id, request.action, request.notes)
    except CharterOpsException as e:
        _raise_http(e, "log_intervention")


@app.get("/api/admin/yacht-bookings/{booking_id}/interventions")
def list_interventions(booking_id: int, repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_intervention_history(repository, booking_id)
    except CharterOpsException as e:
        _raise_http(e, "list_interventions")

# Crew management

@app.get("/api/admin/staff")
def list_staff(repository: CharterRepository = Depends(get_repository)):
    try:
        return repository.list_staff()
    except CharterOpsException as e:
        _raise_http(e, "list_staff")


@app.get("/api/crew/candidates")
def crew_candidates(repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_crew_board(repository)["candidates"]
    except CharterOpsException as e:
        _raise_http(e, "crew_candidates")


@app.get("/api/crew/unassigned-bookings")
def unassigned_bookings(repository: CharterRepository = Depends(get_repository)):
    """Bookings requiring crew"""
    try:
        return handle_crew_board(repository)["unassigned_bookings"]
    except CharterOpsException as e:
        _raise_http(e, "unassigned_bookings")


@app.get("/api/crew/overview")
def crew_overview(repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_crew_board(repository)["overview"]
    except CharterOpsException as e:
        _raise_http(e, "crew_overview")


@app.get("/api/crew/assignments")
def list_assignments(repository: CharterRepository = Depends(get_repository)):
    try:
        return repository.list_assignments()
    except CharterOpsException as e:
        _raise_http(e, "list_assignments")


@app.post("/api/crew/assignments", status_code=201)
def create_assignment(request: AssignCrewRequest, repository: CharterRepository = Depends(get_repository)):
    selection = CrewSelection(
        captain_id=request.captain_id,
        first_mate_id=request.first_mate_id,
        crew_member_ids=request.crew_member_ids
    )
    try:
        return handle_crew_assignment(repository, request.booking_id, selection, request.assignment_notes)
    except CharterOpsException as e:
        _raise_http(e, "create_assignment")


@app.patch("/api/crew/assignments/{assignment_id}")
def update_assignment(assignment_id: str, request: AssignmentStatusUpdate,
                      repository: CharterRepository = Depends(get_repository)):
    try:
        return handle_assignment_status(repository, assignment_id, request.status)
    except CharterOpsException as e:
        _raise_http(e, "update_assignment")
