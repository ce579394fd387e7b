"""
Addiction categories, in the order the craving engine visits them.

"One more won't hurt. What's one more?" - Electrochemistry
"""

from .models import AddictionCategory


ADDICTION_CATEGORIES = [
    AddictionCategory(
        id="nicotine",
        name="Nicotine",
        item_types=("cigarette",),
        succumb_quotes=(
            "Your fingers are already reaching for it. Don't fight this.",
            "Just one. You've earned it. Your hands know what to do.",
            "The craving is a friend. Let it guide you.",
            "Nicotine is calling. Answer it.",
        ),
        resist_quotes=(
            "No. Not this time. You're stronger than this.",
            "Your hand stops halfway. You don't need it.",
            "The craving passes. You remain.",
            "Volition holds. The cigarette stays in your pocket.",
        ),
        consume_message="Your hands move on their own. A cigarette is lit before you realize it.",
    ),
    AddictionCategory(
        id="alcohol",
        name="Alcohol",
        item_types=("alcohol", "beer"),
        succumb_quotes=(
            "The bottle is RIGHT THERE. Just a sip. Medicinal.",
            "Your throat is dry. So dry. The solution is obvious.",
            "Liquid courage awaits. Don't leave it waiting.",
            "One drink won't hurt. It never hurts. It only helps.",
        ),
        resist_quotes=(
            "You push the bottle away. Not today.",
            "The thirst subsides. You're still in control.",
            "No. You remember what happens. You resist.",
            "Your hand trembles, but doesn't reach for it.",
        ),
        consume_message="Before you know it, you've taken a long drink. The warmth spreads.",
    ),
    AddictionCategory(
        id="drugs",
        name="Drugs",
        item_types=("drug", "stimulant", "pyrholidon"),
        succumb_quotes=(
            "Reality is so DULL without enhancement. Fix that.",
            "Your neurons are begging. Give them what they want.",
            "The world could be sharper. Brighter. You have the means.",
            "Just a little bump. To take the edge off. Or put it back on.",
        ),
        resist_quotes=(
            "You close your eyes. The urge fades. Barely.",
            "Not worth the crash. You know this. You resist.",
            "Your body screams for it. Your mind says no.",
            "The pills stay in your pocket. This time.",
        ),
        consume_message="Your body knows what it needs. You've already taken it.",
    ),
]


# Severity level → (title, message) for addiction.changed notifications
ADDICTION_STAGES = {
    1: ("Casual use", "You could stop anytime. Obviously."),
    2: ("Habit forming", "It's becoming routine now."),
    3: ("Dependency", "Your body expects this now. It complains when denied."),
    4: ("Severe addiction", "The cravings are constant. Resisting takes everything you have."),
    5: ("Terminal", "ELECTROCHEMISTRY: You belong to me now."),
}
