"""Bengali festival and observance table, keyed by Bengali month and day."""

from __future__ import annotations

# --- Festival registry: (month index, day, name) ----------------------------
# Illustrative, not exhaustive.

FESTIVALS: list[tuple[int, int, str]] = [
    # Boishakh
    (0, 1,   "পহেলা বৈশাখ"),
    (0, 15,  "রবীন্দ্রনাথ ঠাকুরের জন্মদিন"),
    (0, 25,  "কাজী নজরুল ইসলামের জন্মদিন"),
    # Joishtho
    (1, 15,  "বিশ্ব পরিবেশ দিবস"),
    # Asharh, Srabon, Bhadro
    (2, 1,   "আষাঢ়ের প্রথম দিন"),
    (3, 15,  "শ্রাবণ সংক্রান্তি"),
    (4, 1,   "ভাদ্রের প্রথম দিন"),
    # Ashwin
    (5, 1,   "আশ্বিনের প্রথম দিন"),
    (5, 15,  "দুর্গা পূজা শুরু"),
    (5, 20,  "দুর্গা পূজা"),
    # Kartik
    (6, 1,   "কার্তিকের প্রথম দিন"),
    (6, 15,  "কালী পূজা"),
    # Ogrohayon
    (7, 1,   "অগ্রহায়ণের প্রথম দিন"),
    (7, 15,  "অগ্রহায়ণ সংক্রান্তি"),
    # Poush
    (8, 1,   "পৌষের প্রথম দিন"),
    (8, 15,  "পৌষ সংক্রান্তি"),
    # Magh
    (9, 1,   "মাঘের প্রথম দিন"),
    (9, 15,  "মাঘ সংক্রান্তি"),
    # Falgun
    (10, 1,  "ফাল্গুনের প্রথম দিন"),
    (10, 15, "ফাল্গুন সংক্রান্তি"),
    # Choitro
    (11, 1,  "চৈত্রের প্রথম দিন"),
    (11, 15, "চৈত্র সংক্রান্তি"),
    (11, 30, "চৈত্র সংক্রান্তি"),
]


def get_festivals(month: int, day: int) -> list[str]:
    """Return festival names for a Bengali date, in table order."""
    return [name for m, d, name in FESTIVALS if m == month and d == day]


def festivals_for_month(month: int) -> dict[int, list[str]]:
    """Return {day: [name, ...]} for every festival in a Bengali month."""
    result: dict[int, list[str]] = {}
    for m, d, name in FESTIVALS:
        if m == month:
            result.setdefault(d, []).append(name)
    return result
