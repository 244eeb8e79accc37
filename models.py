import enum
from datetime import datetime
from typing import Optional, List
from sqlmodel import SQLModel, Field, Relationship


class ChallengeType(str, enum.Enum):
    SELECT = "SELECT"
    # assisted listening: options are shown without images
    ASSIST = "ASSIST"


class Course(SQLModel, table=True):
    __tablename__ = "courses"

    id: Optional[int] = Field(default=None, primary_key=True)

    title: str
    image_src: str
    description: str = ""

    units: List["Unit"] = Relationship(back_populates="course")


class Unit(SQLModel, table=True):
    __tablename__ = "units"

    id: Optional[int] = Field(default=None, primary_key=True)

    course_id: int = Field(foreign_key="courses.id", index=True)

    title: str
    description: str = ""
    order: int

    course: Optional[Course] = Relationship(back_populates="units")
    lessons: List["Lesson"] = Relationship(back_populates="unit")


class Lesson(SQLModel, table=True):
    __tablename__ = "lessons"

    id: Optional[int] = Field(default=None, primary_key=True)

    unit_id: int = Field(foreign_key="units.id", index=True)

    title: str
    order: int

    unit: Optional[Unit] = Relationship(back_populates="lessons")
    challenges: List["Challenge"] = Relationship(back_populates="lesson")


class Challenge(SQLModel, table=True):
    __tablename__ = "challenges"

    id: Optional[int] = Field(default=None, primary_key=True)

    lesson_id: int = Field(foreign_key="lessons.id", index=True)

    type: ChallengeType
    question: str
    order: int

    lesson: Optional[Lesson] = Relationship(back_populates="challenges")
    options: List["ChallengeOption"] = Relationship(back_populates="challenge")
    progress: List["ChallengeProgress"] = Relationship(back_populates="challenge")


class ChallengeOption(SQLModel, table=True):
    __tablename__ = "challenge_options"

    id: Optional[int] = Field(default=None, primary_key=True)

    challenge_id: int = Field(foreign_key="challenges.id", index=True)

    text: str
    correct: bool
    image_src: Optional[str] = None
    audio_src: Optional[str] = None

    challenge: Optional[Challenge] = Relationship(back_populates="options")


class ChallengeProgress(SQLModel, table=True):
    __tablename__ = "challenge_progress"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: str = Field(index=True)
    challenge_id: int = Field(foreign_key="challenges.id", index=True)
    completed: bool = False

    challenge: Optional[Challenge] = Relationship(back_populates="progress")


class UserProgress(SQLModel, table=True):
    __tablename__ = "user_progress"

    user_id: str = Field(primary_key=True)

    user_name: str = "User"
    user_image_src: str = "/mascot.svg"
    active_course_id: Optional[int] = Field(default=None, foreign_key="courses.id")
    hearts: int = 5
    points: int = 0


class UserSubscription(SQLModel, table=True):
    __tablename__ = "user_subscription"

    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: str = Field(unique=True)
    stripe_customer_id: str = Field(unique=True)
    stripe_subscription_id: str = Field(unique=True)
    stripe_price_id: str
    stripe_current_period_end: datetime
