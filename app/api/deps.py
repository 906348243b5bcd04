from fastapi import Request

from app.services.coordinator import TimetableCoordinator

def get_coordinator(request: Request) -> TimetableCoordinator:
    # criado uma vez no create_app, compartilhado por todas as requests
    return request.app.state.coordinator
