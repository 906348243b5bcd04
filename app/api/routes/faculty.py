from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy import select

from app.db.session import get_db
from app.models.faculty import Faculty
from app.schemas.faculty import FacultyIn, FacultyOut
from app.services.normalize import normalize_faculty

router = APIRouter(prefix="/faculty", tags=["faculty"])


@router.get("", response_model=list[FacultyOut])
def list_faculty(db: Session = Depends(get_db)):
    rows = db.execute(select(Faculty).order_by(Faculty.position)).scalars().all()
    return [normalize_faculty(r) for r in rows]


@router.post("", response_model=FacultyOut, status_code=status.HTTP_201_CREATED)
def create_faculty(payload: FacultyIn, db: Session = Depends(get_db)):
    member = Faculty(
        name=payload.name,
        email=payload.email,
        department=payload.department or None,
        specializations=payload.specializations,
    )
    db.add(member)
    db.commit()
    db.refresh(member)
    return normalize_faculty(member)


@router.get("/{faculty_id}", response_model=FacultyOut)
def get_faculty(faculty_id: str, db: Session = Depends(get_db)):
    member = db.get(Faculty, faculty_id)
    if not member:
        raise HTTPException(status_code=404, detail="faculty not found")
    return normalize_faculty(member)


@router.delete("/{faculty_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_faculty(faculty_id: str, db: Session = Depends(get_db)):
    member = db.get(Faculty, faculty_id)
    if not member:
        raise HTTPException(status_code=404, detail="faculty not found")

    db.delete(member)
    db.commit()
    return None
