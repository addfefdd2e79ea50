from questboard.core.enums import QuestDifficulty

DEFAULT_DIFFICULTY_COLOR = "#6b7280"

DIFFICULTY_COLORS: dict[QuestDifficulty, str] = {
    QuestDifficulty.EASY: "#10b981",
    QuestDifficulty.MEDIUM: "#f59e0b",
    QuestDifficulty.HARD: "#ef4444",
    QuestDifficulty.LEGENDARY: "#a855f7",
}


def get_difficulty_color(difficulty: str) -> str:
    try:
        return DIFFICULTY_COLORS[QuestDifficulty(difficulty)]
    except ValueError:
        return DEFAULT_DIFFICULTY_COLOR


def get_difficulty_label(difficulty: str) -> str:
    try:
        return QuestDifficulty(difficulty).value.title()
    except ValueError:
        return difficulty
