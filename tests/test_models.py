"""Tests for the course schema mapping."""

from sqlalchemy.orm import configure_mappers
from sqlmodel import Session, select

from models import Challenge, ChallengeOption, ChallengeType, Course, Lesson, Unit


def test_mappers_configure():
    """Every relationship resolves to its target class."""
    configure_mappers()

    assert Course.__mapper__.relationships["units"].mapper.class_ is Unit
    assert Unit.__mapper__.relationships["lessons"].mapper.class_ is Lesson
    assert Lesson.__mapper__.relationships["challenges"].mapper.class_ is Challenge
    assert Challenge.__mapper__.relationships["options"].mapper.class_ is ChallengeOption


def test_table_names():
    assert Course.__tablename__ == "courses"
    assert ChallengeOption.__tablename__ == "challenge_options"


def test_relationships_round_trip(session):
    course = Course(title="French", image_src="/fr.svg")
    session.add(course)
    session.flush()
    unit = Unit(course_id=course.id, title="Fundamentals", order=1)
    session.add(unit)
    session.flush()
    lesson = Lesson(unit_id=unit.id, title="Greetings", order=1)
    session.add(lesson)
    session.flush()
    challenge = Challenge(lesson_id=lesson.id, type=ChallengeType.ASSIST, question='"un" (listen and pick)', order=5)
    session.add(challenge)
    session.flush()
    session.add(ChallengeOption(challenge_id=challenge.id, text="un", correct=True, audio_src="/fr_one.mp3"))
    session.commit()

    loaded = session.exec(select(Course)).one()
    assert [u.title for u in loaded.units] == ["Fundamentals"]
    stored = loaded.units[0].lessons[0].challenges[0]
    assert stored.type == ChallengeType.ASSIST
    assert stored.options[0].image_src is None
    assert stored.lesson.title == "Greetings"
