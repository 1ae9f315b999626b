# backend/planner/services/room_labels.py
# Room-name tables for the explication
# The allocation engine never picks a language itself: callers resolve a
# table here (or bring their own) and pass it in.

from typing import Dict, Mapping
import logging

from ..exceptions import MissingRoomLabelError, UnsupportedLanguageError

logger = logging.getLogger(__name__)

# Keys every label table has to provide
REQUIRED_ROOM_KEYS = (
    'hallway', 'guestWC', 'tech', 'master', 'masterSuite', 'wardrobe',
    'bathroom', 'kids', 'office', 'kitchen', 'living', 'kitchenLiving',
    'laundry', 'halls', 'stairs', 'construction', 'media', 'play',
    # composite names
    'wc', 'ensuite', 'masterTag',
)

ROOM_LABELS: Dict[str, Dict[str, str]] = {
    'ru': {
        'hallway': 'Прихожая',
        'guestWC': 'Гостевой санузел',
        'tech': 'Техническое помещение',
        'master': 'Мастер-спальня',
        'masterSuite': 'Мастер-спальня',
        'wardrobe': 'Гардеробная',
        'bathroom': 'Ванная',
        'kids': 'Спальня',
        'office': 'Кабинет',
        'kitchen': 'Кухня',
        'living': 'Гостиная',
        'kitchenLiving': 'Кухня-гостиная',
        'laundry': 'Постирочная',
        'halls': 'Холлы и коридоры',
        'stairs': 'Лестница',
        'construction': 'Стены и перегородки',
        'media': 'Медиазал',
        'play': 'Игровая',
        'wc': 'Санузел',
        'ensuite': 'Санузел (при кабинете)',
        'masterTag': 'Мастер',
    },
    'en': {
        'hallway': 'Entrance hall',
        'guestWC': 'Guest WC',
        'tech': 'Technical room',
        'master': 'Master bedroom',
        'masterSuite': 'Master bedroom',
        'wardrobe': 'Wardrobe',
        'bathroom': 'Bathroom',
        'kids': 'Bedroom',
        'office': 'Office',
        'kitchen': 'Kitchen',
        'living': 'Living room',
        'kitchenLiving': 'Kitchen-living room',
        'laundry': 'Laundry',
        'halls': 'Halls and corridors',
        'stairs': 'Staircase',
        'construction': 'Walls and partitions',
        'media': 'Media room',
        'play': 'Playroom',
        'wc': 'WC',
        'ensuite': 'WC (En-suite)',
        'masterTag': 'Master',
    },
    'kk': {
        'hallway': 'Кіреберіс',
        'guestWC': 'Қонақ дәретханасы',
        'tech': 'Техникалық бөлме',
        'master': 'Мастер жатын бөлме',
        'masterSuite': 'Мастер жатын бөлме',
        'wardrobe': 'Киім бөлмесі',
        'bathroom': 'Жуынатын бөлме',
        'kids': 'Жатын бөлме',
        'office': 'Кабинет',
        'kitchen': 'Ас үй',
        'living': 'Қонақ бөлме',
        'kitchenLiving': 'Ас үй-қонақ бөлме',
        'laundry': 'Кір жуу бөлмесі',
        'halls': 'Холлдар мен дәліздер',
        'stairs': 'Баспалдақ',
        'construction': 'Қабырғалар мен қалқалар',
        'media': 'Медиазал',
        'play': 'Ойын бөлмесі',
        'wc': 'Дәретхана',
        'ensuite': 'Дәретхана (кабинет жанында)',
        'masterTag': 'Мастер',
    },
}

# Headings of the explication document
DOCUMENT_LABELS: Dict[str, Dict[str, str]] = {
    'ru': {'explication': 'Экспликация помещений', 'floor': 'Этаж', 'room': 'Помещение',
           'area': 'Площадь, м²', 'subtotal': 'Итого по этажу', 'total': 'Общая площадь'},
    'en': {'explication': 'Explication of rooms', 'floor': 'Floor', 'room': 'Room',
           'area': 'Area, m²', 'subtotal': 'Floor subtotal', 'total': 'Total area'},
    'kk': {'explication': 'Бөлмелер экспликациясы', 'floor': 'Қабат', 'room': 'Бөлме',
           'area': 'Аудан, м²', 'subtotal': 'Қабат бойынша барлығы', 'total': 'Жалпы аудан'},
}

SUPPORTED_LANGUAGES = tuple(ROOM_LABELS)


def get_room_labels(language: str) -> Dict[str, str]:
    """Return a copy of the built-in room-name table for a language."""
    table = ROOM_LABELS.get((language or '').lower())
    if table is None:
        raise UnsupportedLanguageError(
            f"Unsupported language: {language}",
            {'language': str(language), 'supported': ', '.join(SUPPORTED_LANGUAGES)}
        )
    return dict(table)


def get_document_labels(language: str) -> Dict[str, str]:
    table = DOCUMENT_LABELS.get((language or '').lower())
    if table is None:
        raise UnsupportedLanguageError(
            f"Unsupported language: {language}",
            {'language': str(language), 'supported': ', '.join(SUPPORTED_LANGUAGES)}
        )
    return dict(table)


def require_room_labels(labels: Mapping[str, str]) -> Mapping[str, str]:
    """
    Check that a label table covers every room key.

    Raises:
        MissingRoomLabelError: listing the missing keys.
    """
    missing = [key for key in REQUIRED_ROOM_KEYS if not labels.get(key)]
    if missing:
        raise MissingRoomLabelError(
            f"Room label table is missing keys: {', '.join(missing)}",
            {'missing': ', '.join(missing)}
        )
    return labels


def merge_room_labels(language: str, overrides: Mapping[str, str] = None) -> Dict[str, str]:
    """Built-in table for ``language`` with caller overrides applied on top."""
    labels = get_room_labels(language)
    if overrides:
        unknown = sorted(set(overrides) - set(REQUIRED_ROOM_KEYS))
        if unknown:
            logger.warning(f"Ignoring unknown room label keys: {unknown}")
        labels.update({k: v for k, v in overrides.items() if k in REQUIRED_ROOM_KEYS})
    return require_room_labels(labels)
