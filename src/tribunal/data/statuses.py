"""
Condition definitions.

Ids are stable keys used in saves and rules; display names carry the
setting's flavor. Each boost is +1 per stack, each debuff -1 per stack.
"""

from .models import EXACT_TRIGGER, EffectCategory, EffectDefinition
from .skills import Skill

PHYSICAL = EffectCategory.PHYSICAL
MENTAL = EffectCategory.MENTAL
ARCHETYPE = EffectCategory.ARCHETYPE

ARCHETYPE_GROUP = "archetype"
PARTY_SET = "party"


# -----------------------------------------------------------------------------
# Physical
# -----------------------------------------------------------------------------

PHYSICAL_EFFECTS = [
    EffectDefinition(
        id="intoxicated",
        display_name="Revacholian Courage",
        simple_name="Drunk",
        category=PHYSICAL,
        boosts=(Skill.ELECTROCHEMISTRY, Skill.INLAND_EMPIRE, Skill.DRAMA,
                Skill.SUGGESTION, Skill.PHYSICAL_INSTRUMENT),
        debuffs=(Skill.LOGIC, Skill.HAND_EYE_COORDINATION, Skill.REACTION_SPEED,
                 Skill.COMPOSURE),
        ancient_voice_trigger=PARTY_SET,
        description="The world softens at the edges. Liquid bravery courses through you.",
    ),
    EffectDefinition(
        id="stimulated",
        display_name="Pyrholidon",
        simple_name="Stimmed",
        category=PHYSICAL,
        boosts=(Skill.REACTION_SPEED, Skill.PERCEPTION, Skill.LOGIC,
                Skill.VISUAL_CALCULUS, Skill.VOLITION),
        debuffs=(Skill.COMPOSURE, Skill.EMPATHY, Skill.INLAND_EMPIRE),
        ancient_voice_trigger=PARTY_SET,
        description="Your neurons fire like a city grid at rush hour. You are AWAKE.",
    ),
    EffectDefinition(
        id="smoking",
        display_name="Nicotine Rush",
        simple_name="Smoking",
        category=PHYSICAL,
        boosts=(Skill.COMPOSURE, Skill.VOLITION, Skill.CONCEPTUALIZATION, Skill.LOGIC),
        debuffs=(Skill.ENDURANCE,),
        description="A small death, a small resurrection.",
    ),
    EffectDefinition(
        id="hungover",
        display_name="Volumetric Shit Compressor",
        simple_name="Hungover",
        category=PHYSICAL,
        boosts=(Skill.PAIN_THRESHOLD, Skill.INLAND_EMPIRE, Skill.ENDURANCE),
        debuffs=(Skill.PERCEPTION, Skill.REACTION_SPEED, Skill.COMPOSURE, Skill.AUTHORITY),
        description="The morning after. Industrial-grade suffering.",
    ),
    EffectDefinition(
        id="wounded",
        display_name="Finger on the Eject Button",
        simple_name="Wounded",
        category=PHYSICAL,
        boosts=(Skill.PAIN_THRESHOLD, Skill.ENDURANCE, Skill.HALF_LIGHT, Skill.VOLITION),
        debuffs=(Skill.COMPOSURE, Skill.SAVOIR_FAIRE, Skill.HAND_EYE_COORDINATION,
                 Skill.AUTHORITY),
        description="Is it worth getting back up? Can you?",
    ),
    EffectDefinition(
        id="exhaustion",
        display_name="Waste Land",
        simple_name="Exhausted",
        category=PHYSICAL,
        boosts=(Skill.VOLITION, Skill.INLAND_EMPIRE, Skill.EMPATHY),
        debuffs=(Skill.REACTION_SPEED, Skill.PERCEPTION, Skill.LOGIC,
                 Skill.PHYSICAL_INSTRUMENT),
        description="You are a barren landscape. Rest is a distant memory.",
    ),
    EffectDefinition(
        id="starving",
        display_name="The Hunger",
        simple_name="Hungry",
        category=PHYSICAL,
        boosts=(Skill.ELECTROCHEMISTRY, Skill.PERCEPTION, Skill.HALF_LIGHT),
        debuffs=(Skill.LOGIC, Skill.COMPOSURE, Skill.VOLITION),
        description="The stomach is a void that echoes.",
    ),
    EffectDefinition(
        id="freezing",
        display_name="Martinaise Winter",
        simple_name="Freezing",
        category=PHYSICAL,
        boosts=(Skill.SHIVERS, Skill.PAIN_THRESHOLD, Skill.INLAND_EMPIRE, Skill.ENDURANCE),
        debuffs=(Skill.HAND_EYE_COORDINATION, Skill.REACTION_SPEED, Skill.INTERFACING),
        description="The cold seeps into your bones.",
    ),
    EffectDefinition(
        id="dying",
        display_name="White Mourning",
        simple_name="Dying",
        category=PHYSICAL,
        boosts=(Skill.PAIN_THRESHOLD, Skill.INLAND_EMPIRE, Skill.SHIVERS, Skill.EMPATHY),
        debuffs=(Skill.LOGIC, Skill.RHETORIC, Skill.AUTHORITY, Skill.PHYSICAL_INSTRUMENT),
        description="The final curtain approaches.",
    ),
    EffectDefinition(
        id="nicotine_withdrawal",
        display_name="Ashtray Hands",
        simple_name="Jittery",
        category=PHYSICAL,
        debuffs=(Skill.COMPOSURE, Skill.VOLITION),
        description="Your fingers keep looking for something that isn't there.",
    ),
]


# -----------------------------------------------------------------------------
# Mental
# -----------------------------------------------------------------------------

MENTAL_EFFECTS = [
    EffectDefinition(
        id="manic",
        display_name="Tequila Sunset",
        simple_name="Manic",
        category=MENTAL,
        boosts=(Skill.ELECTROCHEMISTRY, Skill.REACTION_SPEED, Skill.CONCEPTUALIZATION,
                Skill.INLAND_EMPIRE, Skill.DRAMA),
        debuffs=(Skill.COMPOSURE, Skill.LOGIC, Skill.VOLITION, Skill.AUTHORITY),
        ancient_voice_trigger=PARTY_SET,
        description="The bender takes hold. You are electric and unstoppable.",
    ),
    EffectDefinition(
        id="dissociated",
        display_name="The Pale",
        simple_name="Dissociated",
        category=MENTAL,
        boosts=(Skill.INLAND_EMPIRE, Skill.SHIVERS, Skill.PAIN_THRESHOLD,
                Skill.CONCEPTUALIZATION),
        debuffs=(Skill.PERCEPTION, Skill.REACTION_SPEED, Skill.EMPATHY, Skill.LOGIC,
                 Skill.AUTHORITY),
        ancient_voice_trigger=EXACT_TRIGGER,
        description="Reality dissolves. The ancient voices wake.",
    ),
    EffectDefinition(
        id="infatuated",
        display_name="Homo-Sexual Underground",
        simple_name="Infatuated",
        category=MENTAL,
        boosts=(Skill.ELECTROCHEMISTRY, Skill.SUGGESTION, Skill.EMPATHY, Skill.DRAMA,
                Skill.INLAND_EMPIRE),
        debuffs=(Skill.LOGIC, Skill.VOLITION, Skill.COMPOSURE, Skill.AUTHORITY),
        description="The obsessive spiral of desire.",
    ),
    EffectDefinition(
        id="lucky",
        display_name="Jamrock Shuffle",
        simple_name="Lucky",
        category=MENTAL,
        boosts=(Skill.SHIVERS, Skill.PERCEPTION, Skill.REACTION_SPEED,
                Skill.SAVOIR_FAIRE, Skill.HALF_LIGHT),
        debuffs=(Skill.LOGIC, Skill.ENCYCLOPEDIA, Skill.RHETORIC),
        description="Trust the gut. Let instinct guide you.",
    ),
    EffectDefinition(
        id="terrified",
        display_name="Caustic Echo",
        simple_name="Terrified",
        category=MENTAL,
        boosts=(Skill.HALF_LIGHT, Skill.SHIVERS, Skill.REACTION_SPEED, Skill.PERCEPTION),
        debuffs=(Skill.AUTHORITY, Skill.COMPOSURE, Skill.RHETORIC, Skill.SUGGESTION),
        description="Fight or flight. There is no think.",
    ),
    EffectDefinition(
        id="enraged",
        display_name="Law-Jaw",
        simple_name="Enraged",
        category=MENTAL,
        boosts=(Skill.AUTHORITY, Skill.PHYSICAL_INSTRUMENT, Skill.HALF_LIGHT, Skill.ENDURANCE),
        debuffs=(Skill.EMPATHY, Skill.COMPOSURE, Skill.LOGIC, Skill.SUGGESTION),
        description="Violence simmers beneath the badge.",
    ),
    EffectDefinition(
        id="grieving",
        display_name="The Expression",
        simple_name="Grieving",
        category=MENTAL,
        boosts=(Skill.EMPATHY, Skill.INLAND_EMPIRE, Skill.SHIVERS, Skill.VOLITION,
                Skill.DRAMA),
        debuffs=(Skill.AUTHORITY, Skill.ELECTROCHEMISTRY, Skill.SAVOIR_FAIRE,
                 Skill.COMPOSURE),
        description="Grief made manifest. Everyone can see it.",
    ),
]


# -----------------------------------------------------------------------------
# Archetypes (mutually exclusive identity states)
# -----------------------------------------------------------------------------

ARCHETYPE_EFFECTS = [
    EffectDefinition(
        id="apocalypse_cop",
        display_name="Apocalypse Cop",
        simple_name="Apocalypse Cop",
        category=ARCHETYPE,
        boosts=(Skill.HALF_LIGHT, Skill.AUTHORITY, Skill.SHIVERS, Skill.INLAND_EMPIRE,
                Skill.ENDURANCE),
        debuffs=(Skill.EMPATHY, Skill.SUGGESTION, Skill.SAVOIR_FAIRE),
        exclusion_group=ARCHETYPE_GROUP,
    ),
    EffectDefinition(
        id="sorry_cop",
        display_name="Sorry Cop",
        simple_name="Sorry Cop",
        category=ARCHETYPE,
        boosts=(Skill.EMPATHY, Skill.SUGGESTION, Skill.DRAMA, Skill.VOLITION),
        debuffs=(Skill.AUTHORITY, Skill.PHYSICAL_INSTRUMENT, Skill.HALF_LIGHT),
        exclusion_group=ARCHETYPE_GROUP,
    ),
    EffectDefinition(
        id="superstar_cop",
        display_name="Superstar Cop",
        simple_name="Superstar Cop",
        category=ARCHETYPE,
        boosts=(Skill.AUTHORITY, Skill.SAVOIR_FAIRE, Skill.RHETORIC, Skill.DRAMA,
                Skill.ELECTROCHEMISTRY),
        debuffs=(Skill.EMPATHY, Skill.LOGIC, Skill.COMPOSURE),
        exclusion_group=ARCHETYPE_GROUP,
    ),
    EffectDefinition(
        id="hobocop",
        display_name="Hobocop",
        simple_name="Hobocop",
        category=ARCHETYPE,
        boosts=(Skill.SHIVERS, Skill.INLAND_EMPIRE, Skill.EMPATHY, Skill.ENDURANCE,
                Skill.PERCEPTION),
        debuffs=(Skill.AUTHORITY, Skill.COMPOSURE, Skill.SAVOIR_FAIRE, Skill.SUGGESTION),
        exclusion_group=ARCHETYPE_GROUP,
    ),
    EffectDefinition(
        id="boring_cop",
        display_name="Boring Cop",
        simple_name="Boring Cop",
        category=ARCHETYPE,
        boosts=(Skill.LOGIC, Skill.ENCYCLOPEDIA, Skill.COMPOSURE, Skill.VOLITION,
                Skill.PERCEPTION),
        debuffs=(Skill.DRAMA, Skill.INLAND_EMPIRE, Skill.ELECTROCHEMISTRY,
                 Skill.CONCEPTUALIZATION),
        exclusion_group=ARCHETYPE_GROUP,
    ),
    EffectDefinition(
        id="art_cop",
        display_name="Art Cop",
        simple_name="Art Cop",
        category=ARCHETYPE,
        boosts=(Skill.CONCEPTUALIZATION, Skill.INLAND_EMPIRE, Skill.DRAMA,
                Skill.VISUAL_CALCULUS, Skill.EMPATHY),
        debuffs=(Skill.AUTHORITY, Skill.PHYSICAL_INSTRUMENT, Skill.LOGIC),
        exclusion_group=ARCHETYPE_GROUP,
    ),
]


STATUS_EFFECTS: list[EffectDefinition] = PHYSICAL_EFFECTS + MENTAL_EFFECTS + ARCHETYPE_EFFECTS
