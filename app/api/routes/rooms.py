from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy import select

from app.db.session import get_db
from app.models.room import Room
from app.schemas.room import RoomIn, RoomOut
from app.services.normalize import normalize_room

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=list[RoomOut])
def list_rooms(db: Session = Depends(get_db)):
    rows = db.execute(select(Room).order_by(Room.position)).scalars().all()
    return [normalize_room(r) for r in rows]


@router.post("", response_model=RoomOut, status_code=status.HTTP_201_CREATED)
def create_room(payload: RoomIn, db: Session = Depends(get_db)):
    room = Room(
        name=payload.name,
        capacity=payload.capacity,
        building=payload.building or None,
        floor=payload.floor,
        has_projector=payload.has_projector,
        has_computers=payload.has_computers,
    )
    db.add(room)
    db.commit()
    db.refresh(room)
    return normalize_room(room)


@router.get("/{room_id}", response_model=RoomOut)
def get_room(room_id: str, db: Session = Depends(get_db)):
    room = db.get(Room, room_id)
    if not room:
        raise HTTPException(status_code=404, detail="room not found")
    return normalize_room(room)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: str, db: Session = Depends(get_db)):
    room = db.get(Room, room_id)
    if not room:
        raise HTTPException(status_code=404, detail="room not found")

    db.delete(room)
    db.commit()
    return None
