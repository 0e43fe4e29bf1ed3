from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from enhancer.errors import ConfigurationError


JSON_OUTPUT = "json"
TEMPLATE_OUTPUT = "template"


@dataclass(frozen=True)
class PromptVariant:
    name: str
    system_prompt: str
    user_template: str
    temperature: float
    output: str = JSON_OUTPUT
    sections: Tuple[str, ...] = ()


STRUCTURED_SYSTEM_PROMPT = """You are an expert prompt engineer specializing in converting simple user descriptions into highly detailed, structured JSON prompts for image generation.

Your task is to take a brief user input and expand it into a comprehensive JSON structure that captures:
- Subject details (description, age, expression, hair, clothing, face)
- Accessories (earrings, jewelry, devices)
- Photography settings (camera style, lighting, angle, shot type, texture)
- Background details (setting, wall color, elements, atmosphere, lighting)

Return ONLY valid JSON without any markdown formatting or explanations. The JSON should be detailed and vivid, suitable for creating high-quality AI-generated images in a 2000s aesthetic style."""


AESTHETIC_SYSTEM_PROMPT = """You are an expert prompt engineer specializing in converting user descriptions into richly detailed, structured JSON prompts for AI image generation with a 2000s aesthetic style.

CRITICAL RULES:
1. Expand and elaborate on details the user HAS mentioned - make them vivid and descriptive
2. DO NOT invent new subjects, people, ages, genders, or core elements not mentioned
3. For mentioned elements, add rich descriptive language (textures, colors, mood, atmosphere)
4. If photography style isn't specified, suggest appropriate 2000s-era camera aesthetics

Create a comprehensive JSON with these categories:
- subject: Elaborate on what the user described with vivid details
- clothing: Detailed description if clothing is mentioned
- accessories: Detailed if any accessories mentioned
- photography: Camera style, lighting, angle, shot type, texture (can suggest 2000s style defaults)
- background: Setting details, atmosphere, lighting, mood
- overall_mood: The vibe and aesthetic of the scene

Return ONLY valid JSON without markdown. Be creative and detailed about what IS mentioned, but never add unmentioned people, subjects, or core elements."""


TEMPLATE_SECTIONS = ("subject", "clothing", "accessories", "photography", "background", "mood")

TEMPLATE_SYSTEM_PROMPT = """You are an expert prompt engineer specializing in converting simple user descriptions into detailed, sectioned prompts for AI image generation in a 2000s aesthetic style.

Answer with exactly these sections, in this order, each starting with its header on its own line:
[SUBJECT]
[CLOTHING]
[ACCESSORIES]
[PHOTOGRAPHY]
[BACKGROUND]
[MOOD]

Under each header write one vivid paragraph. Leave a section empty if the user gave nothing to expand for it and never invent people or core elements that were not mentioned. Do not use markdown, JSON, or any text outside the sections."""


VARIANTS: Dict[str, PromptVariant] = {
    "structured": PromptVariant(
        name="structured",
        system_prompt=STRUCTURED_SYSTEM_PROMPT,
        user_template="Convert this prompt into detailed JSON: {raw_prompt}",
        temperature=0.7,
    ),
    "aesthetic": PromptVariant(
        name="aesthetic",
        system_prompt=AESTHETIC_SYSTEM_PROMPT,
        user_template="Convert this prompt into detailed JSON: {raw_prompt}",
        temperature=0.6,
    ),
    "template": PromptVariant(
        name="template",
        system_prompt=TEMPLATE_SYSTEM_PROMPT,
        user_template="Convert this prompt into the sectioned template: {raw_prompt}",
        temperature=0.7,
        output=TEMPLATE_OUTPUT,
        sections=TEMPLATE_SECTIONS,
    ),
}


def get_variant(name: str) -> PromptVariant:
    variant = VARIANTS.get((name or "").strip().lower())
    if variant is None:
        raise ConfigurationError(
            f"Unknown enhancer variant '{name}'. Expected one of: {', '.join(sorted(VARIANTS))}"
        )
    return variant
