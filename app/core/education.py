"""Static content for the COVID-19 education hub."""

from __future__ import annotations
import re
from textwrap import dedent
from typing import Optional

from .models import EducationTopic

_LIST_MARKER = re.compile(r"^(\*|\d+\.)\s+")

EDUCATION_TOPICS: list[EducationTopic] = [
    EducationTopic(
        id="vaccines",
        title="Vaccination Guide",
        icon="🛡️",
        summary="Understanding mRNA, Viral Vector, and Protein Subunit vaccines.",
        details=dedent(
            """\
            **Importance:** Vaccination is the most effective way to protect against severe illness and death from COVID-19.

            **Types of Vaccines:**
            1. **mRNA Vaccines (Pfizer-BioNTech, Moderna):** Use genetically engineered RNA to teach cells how to make a protein that triggers an immune response.
            2. **Viral Vector (AstraZeneca, J&J):** Use a modified version of a different virus to deliver protection instructions.
            3. **Protein Subunit (Novavax):** Contain harmless pieces of the COVID-19 virus to build immunity.

            **Booster Shots:** recommended to maintain immunity over time.
            """
        ),
    ),
    EducationTopic(
        id="protocols",
        title="Health Protocols",
        icon="👥",
        summary="Essential habits: Washing hands, Masks, and Distancing.",
        details=dedent(
            """\
            **Effective Measures:**
            * **Masking:** Wear a high-quality mask (N95/KN95) in crowded indoor spaces.
            * **Hand Hygiene:** Wash hands with soap for 20 seconds or use alcohol-based sanitizer.
            * **Ventilation:** Open windows or use air purifiers to reduce airborne transmission.
            * **Social Distancing:** Maintain 1.5 - 2 meters distance from others when possible.
            """
        ),
    ),
    EducationTopic(
        id="symptoms",
        title="Symptom Recognition",
        icon="🩺",
        summary="Early warning signs and when to seek medical help.",
        details=dedent(
            """\
            **Common Symptoms:**
            * Fever or chills
            * Cough
            * Fatigue
            * Muscle or body aches
            * Headache
            * New loss of taste or smell
            * Sore throat

            **Emergency Warning Signs:** Trouble breathing, persistent chest pain, new confusion, inability to wake or stay awake, pale/gray/blue skin tones. **Seek medical care immediately.**
            """
        ),
    ),
    EducationTopic(
        id="variants",
        title="Variants of Concern",
        icon="⚠️",
        summary="Information on Alpha, Delta, Omicron and sub-variants.",
        details=dedent(
            """\
            Viruses constantly change through mutation.

            **Omicron & Sub-variants (XBB, EG.5, etc.):**
            Currently the dominant strains globally. They tend to be more transmissible but may cause less severe disease in vaccinated individuals compared to Delta.

            **Surveillance:** Global health organizations continue to monitor for new variants that might escape immunity.
            """
        ),
    ),
    EducationTopic(
        id="mental",
        title="Mental Wellbeing",
        icon="💗",
        summary="Coping strategies for pandemic fatigue and anxiety.",
        details=dedent(
            """\
            **Tips for Mental Health:**
            1. **Limit News Consumption:** Take breaks from COVID-19 news to reduce anxiety.
            2. **Stay Connected:** Use video calls to stay in touch with family and friends.
            3. **Healthy Routine:** Prioritize sleep, exercise, and healthy eating.
            4. **Seek Help:** If you feel overwhelmed, contact a professional counselor or helpline.
            """
        ),
    ),
]


def get_topic(topic_id: str) -> Optional[EducationTopic]:
    return next((t for t in EDUCATION_TOPICS if t.id == topic_id), None)


def detail_lines(topic: EducationTopic) -> list[tuple[str, str]]:
    """
    Split topic details into (text, marker) pairs, skipping blank lines.
    Bullets get marker `-`, numbered items keep their `N.`; other lines get "".
    """
    out: list[tuple[str, str]] = []
    for raw in topic.details.splitlines():
        line = raw.strip()
        if not line:
            continue
        m = _LIST_MARKER.match(line)
        if m is None:
            out.append((line, ""))
        else:
            marker = "-" if m.group(1) == "*" else m.group(1)
            out.append((line[m.end():], marker))
    return out
