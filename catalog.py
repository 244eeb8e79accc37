"""
Static content for the French course.

One course, three units, five lessons per unit, four vocabulary pairs per
lesson. Units carry their display order explicitly; lessons are ordered by
their position inside the unit.
"""
from typing import Optional, Tuple
from pydantic import ConfigDict
from sqlmodel import SQLModel

MIN_LESSON_VOCAB = 3


class CatalogError(ValueError):
    """Catalog content that cannot be turned into challenges."""


class VocabItem(SQLModel):
    model_config = ConfigDict(frozen=True)

    english: str
    french: str
    image_src: Optional[str] = None
    audio_src: Optional[str] = None


class LessonDef(SQLModel):
    model_config = ConfigDict(frozen=True)

    title: str
    vocab: Tuple[VocabItem, ...]


class UnitDef(SQLModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    order: int
    lessons: Tuple[LessonDef, ...]


class CourseDef(SQLModel):
    model_config = ConfigDict(frozen=True)

    title: str
    image_src: str
    description: str
    units: Tuple[UnitDef, ...]


def _v(english: str, french: str, image: str, audio: str) -> VocabItem:
    return VocabItem(english=english, french=french, image_src=image, audio_src=audio)


FRENCH_COURSE = CourseDef(
    title="French",
    image_src="/fr.svg",
    description="Comprehensive French beginner course",
    units=[
        UnitDef(
            title="Fundamentals",
            description="Greetings, numbers, colors and basic verbs",
            order=1,
            lessons=[
                LessonDef(title="Greetings", vocab=[
                    _v("the man", "l'homme", "/man.svg", "/fr_man.mp3"),
                    _v("the woman", "la femme", "/woman.svg", "/fr_woman.mp3"),
                    _v("the boy", "le garçon", "/boy.svg", "/fr_boy.mp3"),
                    _v("the girl", "la fille", "/girl.svg", "/fr_girl.mp3"),
                ]),
                LessonDef(title="Numbers 1-4", vocab=[
                    _v("one", "un", "/one.svg", "/fr_one.mp3"),
                    _v("two", "deux", "/two.svg", "/fr_two.mp3"),
                    _v("three", "trois", "/three.svg", "/fr_three.mp3"),
                    _v("four", "quatre", "/four.svg", "/fr_four.mp3"),
                ]),
                LessonDef(title="Colors", vocab=[
                    _v("red", "rouge", "/red.svg", "/fr_red.mp3"),
                    _v("blue", "bleu", "/blue.svg", "/fr_blue.mp3"),
                    _v("green", "vert", "/green.svg", "/fr_green.mp3"),
                    _v("yellow", "jaune", "/yellow.svg", "/fr_yellow.mp3"),
                ]),
                LessonDef(title="Common Phrases", vocab=[
                    _v("hello", "bonjour", "/hello.svg", "/fr_bonjour.mp3"),
                    _v("goodbye", "au revoir", "/goodbye.svg", "/fr_aurevoir.mp3"),
                    _v("please", "s'il vous plaît", "/please.svg", "/fr_svp.mp3"),
                    _v("thank you", "merci", "/thankyou.svg", "/fr_merci.mp3"),
                ]),
                LessonDef(title="Basic Verbs", vocab=[
                    _v("to eat", "manger", "/eat.svg", "/fr_manger.mp3"),
                    _v("to drink", "boire", "/drink.svg", "/fr_boire.mp3"),
                    _v("to go", "aller", "/go.svg", "/fr_aller.mp3"),
                    _v("to be", "être", "/be.svg", "/fr_etre.mp3"),
                ]),
            ],
        ),
        UnitDef(
            title="Food & Dining",
            description="Food, drinks, ordering and taste",
            order=2,
            lessons=[
                LessonDef(title="Food Items", vocab=[
                    _v("bread", "le pain", "/bread.svg", "/fr_bread.mp3"),
                    _v("cheese", "le fromage", "/cheese.svg", "/fr_cheese.mp3"),
                    _v("apple", "la pomme", "/apple.svg", "/fr_apple.mp3"),
                    _v("water", "l'eau", "/water.svg", "/fr_water.mp3"),
                ]),
                LessonDef(title="Ordering", vocab=[
                    _v("I would like", "Je voudrais", "/wouldlike.svg", "/fr_jevoudrais.mp3"),
                    _v("the menu", "le menu", "/menu.svg", "/fr_menu.mp3"),
                    _v("the bill", "l'addition", "/bill.svg", "/fr_bill.mp3"),
                    _v("a table for two", "une table pour deux", "/table.svg", "/fr_table2.mp3"),
                ]),
                LessonDef(title="Drinks", vocab=[
                    _v("coffee", "le café", "/coffee.svg", "/fr_coffee.mp3"),
                    _v("tea", "le thé", "/tea.svg", "/fr_tea.mp3"),
                    _v("wine", "le vin", "/wine.svg", "/fr_wine.mp3"),
                    _v("beer", "la bière", "/beer.svg", "/fr_beer.mp3"),
                ]),
                LessonDef(title="At the Café", vocab=[
                    _v("I am hungry", "J'ai faim", "/hungry.svg", "/fr_hungry.mp3"),
                    _v("I am thirsty", "J'ai soif", "/thirsty.svg", "/fr_thirsty.mp3"),
                    _v("the special", "le plat du jour", "/special.svg", "/fr_special.mp3"),
                    _v("to pay", "payer", "/pay.svg", "/fr_pay.mp3"),
                ]),
                LessonDef(title="Taste Adjectives", vocab=[
                    _v("tasty", "délicieux", "/tasty.svg", "/fr_tasty.mp3"),
                    _v("sweet", "sucré", "/sweet.svg", "/fr_sweet.mp3"),
                    _v("sour", "acide", "/sour.svg", "/fr_sour.mp3"),
                    _v("spicy", "épicé", "/spicy.svg", "/fr_spicy.mp3"),
                ]),
            ],
        ),
        UnitDef(
            title="Travel & Directions",
            description="Places, transport, directions and emergencies",
            order=3,
            lessons=[
                LessonDef(title="Places", vocab=[
                    _v("station", "la gare", "/station.svg", "/fr_station.mp3"),
                    _v("airport", "l'aéroport", "/airport.svg", "/fr_airport.mp3"),
                    _v("hotel", "l'hôtel", "/hotel.svg", "/fr_hotel.mp3"),
                    _v("museum", "le musée", "/museum.svg", "/fr_museum.mp3"),
                ]),
                LessonDef(title="Directions", vocab=[
                    _v("left", "à gauche", "/left.svg", "/fr_left.mp3"),
                    _v("right", "à droite", "/right.svg", "/fr_right.mp3"),
                    _v("straight", "tout droit", "/straight.svg", "/fr_straight.mp3"),
                    _v("near", "près", "/near.svg", "/fr_near.mp3"),
                ]),
                LessonDef(title="Transport", vocab=[
                    _v("bus", "le bus", "/bus.svg", "/fr_bus.mp3"),
                    _v("train", "le train", "/train.svg", "/fr_train.mp3"),
                    _v("taxi", "un taxi", "/taxi.svg", "/fr_taxi.mp3"),
                    _v("subway", "le métro", "/metro.svg", "/fr_metro.mp3"),
                ]),
                LessonDef(title="At the Hotel", vocab=[
                    _v("reservation", "une réservation", "/reservation.svg", "/fr_reservation.mp3"),
                    _v("key", "la clé", "/key.svg", "/fr_key.mp3"),
                    _v("room", "la chambre", "/room.svg", "/fr_room.mp3"),
                    _v("check-in", "l'enregistrement", "/checkin.svg", "/fr_checkin.mp3"),
                ]),
                LessonDef(title="Emergencies & Help", vocab=[
                    _v("help", "à l'aide", "/help.svg", "/fr_help.mp3"),
                    _v("doctor", "le médecin", "/doctor.svg", "/fr_doctor.mp3"),
                    _v("police", "la police", "/police.svg", "/fr_police.mp3"),
                    _v("pharmacy", "la pharmacie", "/pharmacy.svg", "/fr_pharmacy.mp3"),
                ]),
            ],
        ),
    ],
)


def validate_catalog(course: CourseDef) -> None:
    seen_orders = set()
    for unit in course.units:
        if unit.order in seen_orders:
            raise CatalogError(f"Unit order {unit.order} used twice (unit {unit.title!r})")
        seen_orders.add(unit.order)

        for lesson in unit.lessons:
            where = f"{unit.title} / {lesson.title}"
            if len(lesson.vocab) < MIN_LESSON_VOCAB:
                raise CatalogError(
                    f"{where}: needs at least {MIN_LESSON_VOCAB} vocabulary items, got {len(lesson.vocab)}"
                )
            terms = [v.french for v in lesson.vocab]
            if len(set(terms)) != len(terms):
                raise CatalogError(f"{where}: duplicate French terms")
