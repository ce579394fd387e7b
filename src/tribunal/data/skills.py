"""The 24 skills conditions can push up or down."""

from enum import Enum


class Skill(str, Enum):
    # Intellect
    LOGIC = "logic"
    ENCYCLOPEDIA = "encyclopedia"
    RHETORIC = "rhetoric"
    DRAMA = "drama"
    CONCEPTUALIZATION = "conceptualization"
    VISUAL_CALCULUS = "visual_calculus"

    # Psyche
    VOLITION = "volition"          # Resists cravings
    INLAND_EMPIRE = "inland_empire"
    EMPATHY = "empathy"
    AUTHORITY = "authority"
    SUGGESTION = "suggestion"
    ESPRIT_DE_CORPS = "esprit_de_corps"

    # Physique
    ENDURANCE = "endurance"
    PAIN_THRESHOLD = "pain_threshold"
    PHYSICAL_INSTRUMENT = "physical_instrument"
    ELECTROCHEMISTRY = "electrochemistry"
    HALF_LIGHT = "half_light"
    SHIVERS = "shivers"

    # Motorics
    HAND_EYE_COORDINATION = "hand_eye_coordination"
    PERCEPTION = "perception"
    REACTION_SPEED = "reaction_speed"
    SAVOIR_FAIRE = "savoir_faire"
    INTERFACING = "interfacing"
    COMPOSURE = "composure"


# Skill consulted by the craving resistance check
RESIST_SKILL = Skill.VOLITION
