"""Hardcoded prompt templates and the registry that dispatches to them.

Styles that need precise, predictable behavior (a guaranteed pure-white
cutout, readable filenames on 3D icons, a developer portrait with a given
pose) get a hand-written template here instead of a remote-optimized prompt.

Every builder takes the request's :class:`GenerationConfig` and returns the
finished English instruction. Builders are registered per style; a style
without a builder is delegated to the remote optimizer by the composer.

Usage Example
-------------
    >>> from snapstudio.core.prompt_templates import template_registry
    >>> builder = template_registry.get(StylePreset.REMOVE_BG)
    >>> builder(GenerationConfig(style=StylePreset.REMOVE_BG))
    'Solid white background #FFFFFF. Isolate the object. No shadows. Clean cutout.'
"""

import logging
from collections.abc import Callable

from .catalog import StylePreset
from .models import GenerationConfig
from .options import CameraAngle

logger = logging.getLogger(__name__)

TemplateBuilder = Callable[[GenerationConfig], str]

REMOVE_BG_PROMPT = "Solid white background #FFFFFF. Isolate the object. No shadows. Clean cutout."
UPSCALE_PROMPT = "Upscale and enhance to 8k ultra resolution. Remove noise. sharpen details."


class TemplateRegistry:
    """Registry mapping style presets to template builders.

    Usage
    -----
        >>> @template_registry.register(StylePreset.FOOD_PHOTOGRAPHY)
        ... def build_food(cfg: GenerationConfig) -> str:
        ...     return "..."
    """

    def __init__(self) -> None:
        """Initialize an empty template registry."""
        self._builders: dict[StylePreset, TemplateBuilder] = {}

    def register(self, style: StylePreset) -> Callable[[TemplateBuilder], TemplateBuilder]:
        """Register the decorated function as the builder for ``style``."""

        def decorator(builder: TemplateBuilder) -> TemplateBuilder:
            if style in self._builders:
                logger.warning(f"Template for '{style.value}' is already registered, overwriting")
            self._builders[style] = builder
            return builder

        return decorator

    def get(self, style: StylePreset) -> TemplateBuilder | None:
        """Return the builder for a style, or None if it has no template."""
        return self._builders.get(style)

    def has_template(self, style: StylePreset) -> bool:
        """Check whether a style has a registered builder."""
        return style in self._builders

    def list_styles(self) -> list[StylePreset]:
        """List the styles with a registered builder, in registration order."""
        return list(self._builders.keys())


template_registry = TemplateRegistry()


def _lines(*lines: str) -> str:
    # Empty entries (e.g. an unset constraint clause) are dropped
    return "\n".join(line for line in lines if line)


@template_registry.register(StylePreset.REMOVE_BG)
def build_remove_background(cfg: GenerationConfig) -> str:
    return REMOVE_BG_PROMPT


@template_registry.register(StylePreset.UPSCALE)
def build_upscale(cfg: GenerationConfig) -> str:
    return UPSCALE_PROMPT


@template_registry.register(StylePreset.IMAGINE_V5)
def build_imagine(cfg: GenerationConfig) -> str:
    """Fantastical text-to-image concept art."""
    topic = cfg.prompt or "Future Technology"
    return _lines(
        "Create a mind-bending, futuristic, high-tech masterpiece concept art "
        f'based on the concept: "{topic}".',
        cfg.constraint_clause,
        "Style: Unreal Engine 5, 8k Resolution, Cyberpunk/Sci-Fi Aesthetic, "
        "Volumetric Lighting, Neon Glow.",
        "Details: Intricate mechanical details, futuristic architecture, "
        "glowing data streams, obsidian and glass textures.",
        f"Composition: Cinematic {cfg.angle.value}, Shot Distance: {cfg.distance.value}, "
        f"Dynamic Lighting ({cfg.lighting.value}), Epic Scale.",
        'The image should look insanely detailed and "crazy" creative. Ultra-sharp.',
    )


@template_registry.register(StylePreset.PURE_CREATION)
def build_pure_creation(cfg: GenerationConfig) -> str:
    """Realistic text-to-image scene."""
    topic = cfg.prompt or "A beautiful scene"
    return _lines(
        "Create a Professional, High-Quality, Photorealistic image based on "
        f'the description: "{topic}".',
        cfg.constraint_clause,
        "Style: Cinematic Photography, Commercial Quality, Highly Detailed, Natural Textures.",
        f"Lighting: {cfg.lighting.value}.",
        f"Angle: {cfg.angle.value}.",
        f"Distance: {cfg.distance.value}.",
        "Composition: Balanced, professional, aesthetically pleasing.",
        "Quality: 8k, Sharp Focus, Masterpiece.",
    )


@template_registry.register(StylePreset.FREE_EDIT)
def build_free_edit(cfg: GenerationConfig) -> str:
    topic = cfg.prompt or "Enhance the image"
    return _lines(
        "Task: Creative Image Editing / Manipulation.",
        f'User Instruction: "{topic}".',
        cfg.constraint_clause,
        "Guidelines:",
        "- Modify the image according to the user's instruction precisely.",
        "- You have creative freedom to change the subject, background, or atmosphere "
        "if the prompt implies it.",
        f"- Lighting preference: {cfg.lighting.value}.",
        "- Maintain high quality, 8k resolution.",
    )


@template_registry.register(StylePreset.FILES_3D_RENDER)
def build_files_3d(cfg: GenerationConfig) -> str:
    """UI screenshot of files turned into a 3D isometric illustration."""
    return _lines(
        "Transform the UI Screenshot of files into a High-End 3D Isometric Illustration.",
        cfg.constraint_clause,
        "Subject: The Folders and Files visible in the image.",
        "Action: Convert the flat 2D icons into premium 3D Objects.",
        "CRITICAL PRIORITY: TEXT CLARITY.",
        "- The filenames (e.g., style.css, index.html) visible in the source image MUST be "
        "preserved and rendered as SHARP, HIGH-CONTRAST 3D TYPOGRAPHY.",
        "- Ensure the text is large enough to be readable.",
        "- Do not blur the text.",
        "Details:",
        "- Folders: Render as puffy, matte yellow 3D folders (Claymorphism style).",
        "- Files: Render as floating glossy sheets or 3D cards.",
        "- Composition: Floating dynamically above a frosted glass platform.",
        "- Elements: Add small floating 3D primitive shapes (cubes, spheres) around them "
        "for elegance.",
        "- Lighting: Soft, warm studio lighting with rim lights.",
        "- Background: Dark grey or clean dark studio environment.",
        "Style: Blender 3D Render, Cute, Elegant, Clean, High Quality.",
    )


@template_registry.register(StylePreset.CODING_HOLOGRAM)
def build_coding_hologram(cfg: GenerationConfig) -> str:
    return _lines(
        "Professional Futuristic Product Photography.",
        cfg.constraint_clause,
        "Subject: The Laptop/Computer screen.",
        "Effect: VISUALIZATION OF CODE AS HOLOGRAPHIC ART.",
        "Details:",
        "- The code/text on the screen transforms into glowing, 3D holographic data streams "
        "that flow OUT of the physical screen into the air.",
        '- Treat the code as a "Visual Texture" rather than readable text.',
        "- The data flow wraps elegantly around the device like a magical tech aura.",
        "- Colors: Electric Blue, Neon Purple, and Cyber Cyan "
        "(Matrix style but modern and elegant).",
        "- Lighting: Volumetric lighting rays emanating from the display.",
        "- The laptop hardware remains sharp, realistic, and premium.",
        "Background: Dark, sleek, high-tech abstract environment (Depth of field).",
        "Vibe: Advertising for advanced AI or Quantum Computing.",
        "Quality: 8k, Unreal Engine Render style, Particle Effects.",
    )


@template_registry.register(StylePreset.DEVELOPER_PRO)
def build_developer_pro(cfg: GenerationConfig) -> str:
    """Cinematic software-engineer portrait; honours pose, distance and gaze."""
    return _lines(
        "Professional Cinematic Portrait of a Senior Software Engineer / Hacker.",
        cfg.constraint_clause,
        "Setting: High-Tech futuristic workspace command center.",
        "Details:",
        "- Surrounded by multiple curved monitors displaying complex neon blue and purple "
        "code (Python/React/C++).",
        "- Floating holographic data interfaces in the air.",
        "- Cyberpunk city skyline visible through large glass windows in the back.",
        "- Lighting: Dramatic mix of deep purple (Venom) and electric blue neon rim lighting.",
        "- Atmosphere: Serious, professional, tech-savvy, futuristic, "
        "high-end production value.",
        "- Quality: 8k, Unreal Engine 5 render style, raytracing, sharp focus on the person.",
        f"- POSE: {cfg.pose.value} (Ensure the subject follows this pose in a natural, "
        "professional way).",
        f"- DISTANCE: {cfg.distance.value}.",
        f"- EYE GAZE / FACE DIRECTION: {cfg.face_direction.value}.",
    )


@template_registry.register(StylePreset.SMARTPHONE_PHOTO)
def build_smartphone(cfg: GenerationConfig) -> str:
    return _lines(
        "Professional High-End Tech Product Photography for Smartphone.",
        cfg.constraint_clause,
        "Subject: The Smartphone (Display and Body).",
        "Style: Apple/Samsung Official Advertisement Style. Sleek, Minimalist, Premium.",
        "Details:",
        "- Accentuate the screen vibrancy and bezel-less design.",
        "- Highlight the camera module lens reflections (Glass texture).",
        "- Body Material: Brushed Metal or Polished Glass.",
        f"Lighting: {cfg.lighting.value} (Softbox or Rim lighting to highlight edges).",
        "Background: Abstract Tech, Smooth Gradient, or Floating Geometry.",
        "Quality: 8k, Ultra-Sharp Macro details.",
    )


@template_registry.register(StylePreset.TECH_ACCESSORIES)
def build_tech_accessories(cfg: GenerationConfig) -> str:
    return _lines(
        "Professional Commercial Product Photography for Tech Accessories.",
        cfg.constraint_clause,
        "Subject: Gadget/Accessory (Headphones, Smartwatch, Case, or Charger).",
        "Style: Premium Tech Editorial (The Verge / MKBHD style).",
        "Details:",
        "- Focus on premium materials: Matte Silicone, Brushed Aluminum, Leather texture, "
        "Mesh fabric.",
        "- Highlight LEDs or Screen displays if applicable.",
        "- Clean, modern, minimalist studio setting.",
        f"Lighting: {cfg.lighting.value} (Soft, controlled studio lighting to show form).",
        "Background: Monochrome matte surface or architectural concrete.",
        "Quality: 8k, Macro focus on textures.",
    )


@template_registry.register(StylePreset.FOOD_PHOTOGRAPHY)
def build_food(cfg: GenerationConfig) -> str:
    return _lines(
        "Professional Commercial Food Photography.",
        cfg.constraint_clause,
        "Subject: The food item (Sweet, Biscuit, Dish, or Drink).",
        "Style: High-end culinary magazine style (Bon Appétit).",
        "Details: Focus on appetizing textures, crumbs, glaze, steam, freshness.",
        "Lighting: Soft, diffused natural window lighting or professional studio food "
        "lighting to enhance appetite appeal.",
        "Background: Complementary culinary setting (marble counter, wooden table, cafe, bakery).",
        f"Composition: {cfg.angle.value}, {cfg.distance.value}, {cfg.aspect_ratio.value}.",
        "Vibe: Delicious, Fresh, Premium.",
        "Quality: 8k, Macro focus.",
    )


@template_registry.register(StylePreset.SHOES_ELEGANCE)
def build_shoes(cfg: GenerationConfig) -> str:
    """Sneaker shot; an eye-level angle is replaced by a floating composition."""
    composition = (
        "Floating dynamically" if cfg.angle == CameraAngle.EYE_LEVEL else cfg.angle.value
    )
    return _lines(
        "Professional Commercial Sneaker/Shoe Photography.",
        cfg.constraint_clause,
        "Style: Hypebeast Streetwear or Luxury Editorial.",
        "Details: Ultra-sharp focus on fabric/leather texture, stitching, and logos.",
        f"Composition: {composition}.",
        f"Distance: {cfg.distance.value}.",
        f"Lighting: {cfg.lighting.value} (Emphasis on rim lighting to show silhouette).",
        "Background: Concrete, Abstract Geometric, or Studio.",
        "Quality: 8k, Ultra-Sharp.",
    )


@template_registry.register(StylePreset.FASHION_CLOTHING)
def build_fashion(cfg: GenerationConfig) -> str:
    return _lines(
        "High Fashion Editorial Photography.",
        cfg.constraint_clause,
        "Style: Vogue/Harper's Bazaar Aesthetic.",
        "Details: Focus on fabric drape, texture, and fit.",
        f"Subject Pose: {cfg.pose.value}.",
        f"Distance: {cfg.distance.value}.",
        f"Lighting: {cfg.lighting.value} (Fashion Studio Lighting).",
        "Background: Minimalist luxury or urban chic.",
        "Quality: 8k, Texture rich.",
    )
