"""
Seed the database with the French course.

Wipes every course, unit, lesson, challenge and option (plus the user
progress and subscription rows that point at them) and rebuilds the content
from catalog.FRENCH_COURSE:

  - one SELECT challenge per vocabulary item of a lesson
  - two ASSIST challenges per lesson, for its first and last items
  - three options per challenge: the correct translation and two
    distractors from the same lesson, in random order

The reset and the inserts share one transaction, so a failed run leaves the
database as it was.

Usage:
    python seed_french.py
"""
import random
import sys
from typing import List, NamedTuple, Optional, Sequence, Tuple

from sqlalchemy import delete
from sqlmodel import Session

from catalog import FRENCH_COURSE, CatalogError, CourseDef, LessonDef, UnitDef, VocabItem, validate_catalog
from db import engine, init_db, random_seed
from models import (
    Challenge,
    ChallengeOption,
    ChallengeProgress,
    ChallengeType,
    Course,
    Lesson,
    Unit,
    UserProgress,
    UserSubscription,
)

# children before parents (foreign keys)
RESET_ORDER = [
    ChallengeProgress,
    ChallengeOption,
    Challenge,
    Lesson,
    Unit,
    UserProgress,
    UserSubscription,
    Course,
]

DISTRACTORS_PER_CHALLENGE = 2


class SeedSummary(NamedTuple):
    courses: int
    units: int
    lessons: int
    challenges: int
    options: int


def select_question(item: VocabItem) -> str:
    return f'Which one of these is "{item.english}"?'


def assist_question(item: VocabItem) -> str:
    return f'"{item.french}" (listen and pick)'


# =========================
# RESET
# =========================
def reset_content(session: Session) -> None:
    for model in RESET_ORDER:
        session.exec(delete(model))


# =========================
# HIERARCHY
# =========================
def insert_course(session: Session, course: CourseDef) -> Course:
    row = Course(title=course.title, image_src=course.image_src, description=course.description)
    session.add(row)
    session.flush()
    return row


def insert_units(session: Session, course_row: Course, units: Sequence[UnitDef]) -> List[Unit]:
    rows = [
        Unit(course_id=course_row.id, title=u.title, description=u.description, order=u.order)
        for u in units
    ]
    session.add_all(rows)
    session.flush()
    return rows


def insert_lessons(session: Session, unit_row: Unit, lessons: Sequence[LessonDef]) -> List[Lesson]:
    # catalog lessons have no order of their own; position in the unit decides
    rows = [
        Lesson(unit_id=unit_row.id, title=lesson.title, order=idx)
        for idx, lesson in enumerate(lessons, start=1)
    ]
    session.add_all(rows)
    session.flush()
    return rows


# =========================
# CHALLENGES
# =========================
def build_challenges(lesson_id: Optional[int], vocab: Sequence[VocabItem]) -> List[Tuple[Challenge, VocabItem]]:
    """
    Challenges for one lesson, each paired with the vocabulary item it asks for.

    SELECT challenges come first (one per item, order 1..V), then the two
    ASSIST challenges for the first and last items (order V+1, V+2).
    """
    if not vocab:
        raise CatalogError("Lesson has no vocabulary")

    pairs = [
        (Challenge(lesson_id=lesson_id, type=ChallengeType.SELECT, question=select_question(item), order=idx), item)
        for idx, item in enumerate(vocab, start=1)
    ]

    assist_items = [vocab[0], vocab[-1]]
    for offset, item in enumerate(assist_items, start=1):
        pairs.append((
            Challenge(
                lesson_id=lesson_id,
                type=ChallengeType.ASSIST,
                question=assist_question(item),
                order=len(vocab) + offset,
            ),
            item,
        ))
    return pairs


def insert_challenges(session: Session, pairs: Sequence[Tuple[Challenge, VocabItem]]) -> None:
    session.add_all([challenge for challenge, _ in pairs])
    session.flush()


# =========================
# OPTIONS
# =========================
def build_options(
    challenge: Challenge,
    correct: VocabItem,
    vocab: Sequence[VocabItem],
    rng: random.Random,
) -> List[ChallengeOption]:
    pool = [v for v in vocab if v.french != correct.french]
    if len(pool) < DISTRACTORS_PER_CHALLENGE:
        raise CatalogError(
            f"Not enough distractors for {correct.french!r}: "
            f"need {DISTRACTORS_PER_CHALLENGE}, lesson offers {len(pool)}"
        )
    distractors = rng.sample(pool, DISTRACTORS_PER_CHALLENGE)

    options = [
        ChallengeOption(
            challenge_id=challenge.id,
            text=item.french,
            correct=item is correct,
            image_src=item.image_src,
            audio_src=item.audio_src,
        )
        for item in [correct, *distractors]
    ]
    rng.shuffle(options)

    if challenge.type == ChallengeType.ASSIST:
        for opt in options:
            opt.image_src = None
    return options


def insert_options(session: Session, options: Sequence[ChallengeOption]) -> None:
    session.add_all(options)
    session.flush()


# =========================
# ORCHESTRATION
# =========================
def seed_lesson(session: Session, lesson_row: Lesson, lesson: LessonDef, rng: random.Random) -> Tuple[int, int]:
    pairs = build_challenges(lesson_row.id, lesson.vocab)
    insert_challenges(session, pairs)

    options_count = 0
    for challenge, correct in pairs:
        options = build_options(challenge, correct, lesson.vocab, rng)
        insert_options(session, options)
        options_count += len(options)
    return len(pairs), options_count


def seed(session: Session, course: CourseDef = FRENCH_COURSE, rng: Optional[random.Random] = None) -> SeedSummary:
    """
    Replace all course content with `course`.

    `session` must not have a transaction in progress; the whole reset and
    insert runs in one, committed on success and rolled back on any error.
    """
    if session.in_transaction():
        raise RuntimeError(
            "seed() needs a session with no transaction in progress; commit or close it first"
        )
    validate_catalog(course)
    rng = rng or random.Random()

    units_count = lessons_count = challenges_count = options_count = 0
    with session.begin():
        reset_content(session)

        course_row = insert_course(session, course)
        unit_rows = insert_units(session, course_row, course.units)
        units_count = len(unit_rows)

        for unit_row, unit in zip(unit_rows, course.units):
            lesson_rows = insert_lessons(session, unit_row, unit.lessons)
            lessons_count += len(lesson_rows)

            for lesson_row, lesson in zip(lesson_rows, unit.lessons):
                c, o = seed_lesson(session, lesson_row, lesson, rng)
                challenges_count += c
                options_count += o

    return SeedSummary(
        courses=1,
        units=units_count,
        lessons=lessons_count,
        challenges=challenges_count,
        options=options_count,
    )


def main() -> int:
    print("Seeding database with the French course...")
    try:
        rng = random.Random(random_seed())
        init_db(engine)
        with Session(engine) as session:
            summary = seed(session, FRENCH_COURSE, rng)
    except Exception as exc:
        print(f"Failed to seed French database: {exc}", file=sys.stderr)
        return 1

    print(
        f"French course seeded: {summary.units} units, {summary.lessons} lessons, "
        f"{summary.challenges} challenges, {summary.options} options"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
