from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy import select

from app.db.session import get_db
from app.models.course import Course
from app.schemas.course import CourseIn, CourseOut
from app.services.normalize import normalize_course

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseOut])
def list_courses(db: Session = Depends(get_db)):
    rows = db.execute(select(Course).order_by(Course.position)).scalars().all()
    return [normalize_course(r) for r in rows]


@router.post("", response_model=CourseOut, status_code=status.HTTP_201_CREATED)
def create_course(payload: CourseIn, db: Session = Depends(get_db)):
    course = Course(
        name=payload.name,
        code=payload.code,
        enrollment=payload.enrollment,
        duration_hours=payload.duration_hours,
        description=payload.description or None,
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    return normalize_course(course)


@router.get("/{course_id}", response_model=CourseOut)
def get_course(course_id: str, db: Session = Depends(get_db)):
    course = db.get(Course, course_id)
    if not course:
        raise HTTPException(status_code=404, detail="course not found")
    return normalize_course(course)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: str, db: Session = Depends(get_db)):
    course = db.get(Course, course_id)
    if not course:
        raise HTTPException(status_code=404, detail="course not found")

    db.delete(course)
    db.commit()
    return None
