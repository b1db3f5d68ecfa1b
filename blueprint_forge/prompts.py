"""Prompt sent to the hosted generator when AI game code is requested.

Sections are emitted in a fixed order (title, theme, description,
references, instruction) and only when present; the deliverable and mobile
constraints are always appended.
"""

from blueprint_forge.models import GameBrief
from blueprint_forge.templating import render

DELIVERABLE = (
    "Livrable attendu : Fournis un fichier HTML complet contenant tout le CSS et JavaScript "
    "nécessaire pour un jeu jouable directement dans un navigateur. Tu peux inclure des "
    "bibliothèques externes via des CDN publics si nécessaire, mais intègre toute la logique "
    "dans ce fichier afin qu'il soit exécutable tel quel."
)

MOBILE_CONSTRAINTS = (
    "Contraintes mobiles : Le prototype doit être responsive et parfaitement jouable sur "
    "smartphone. Ajoute une interface tactile (joystick ou zones directionnelles + boutons "
    "d'action) en overlay qui fonctionne par événements pointer/touch. Conserve la "
    "compatibilité clavier (ZQSD / flèches) en plus des contrôles tactiles. Assure-toi que "
    "la zone de jeu utilise toute la largeur disponible et que les boutons sont suffisamment "
    "espacés pour les doigts."
)

MOBILE_OPTIMISATION = (
    "Optimisation mobile : limite les assets lourds, évite les dépendances inutiles et active "
    "requestAnimationFrame pour les boucles de jeu. Empêche le défilement de la page lors des "
    "interactions tactiles avec le canvas ou la scène du jeu."
)

GAME_PROMPT_TEMPLATE = (
    "{{#if title}}Titre du jeu : {{{title}}}\n\n{{/if}}"
    "{{#if theme}}Thématique : {{{theme}}}\n\n{{/if}}"
    "{{#if description}}Description détaillée : {{{description}}}\n\n{{/if}}"
    "{{#if references}}Références visuelles : {{{join references \", \"}}}\n\n{{/if}}"
    "{{#if instruction}}Instruction supplémentaire : {{{instruction}}}\n\n{{/if}}"
    "{{{deliverable}}}\n\n"
    "{{{mobile_constraints}}}\n\n"
    "{{{mobile_optimisation}}}"
)


def build_game_prompt(brief: GameBrief, instruction: str | None = None) -> str:
    return render(GAME_PROMPT_TEMPLATE, {
        "title": brief.title.strip(),
        "theme": brief.theme.strip(),
        "description": brief.description.strip(),
        "references": [r for r in brief.references if r.strip()],
        "instruction": (instruction or "").strip(),
        "deliverable": DELIVERABLE,
        "mobile_constraints": MOBILE_CONSTRAINTS,
        "mobile_optimisation": MOBILE_OPTIMISATION,
    })
