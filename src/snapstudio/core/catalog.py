"""Style preset catalog.

Each style preset bundles display metadata (label, icon), the default prompt
fragment sent to the remote optimizer, and two capability flags that decide
how the rest of the system treats it:

- ``prompt_mode`` tells the prompt composer whether the style has a fixed
  instruction, a hardcoded template, or is delegated to the remote text model.
- ``scene_task`` tells the scene generator which task description to send
  to the image model.

Keeping both flags on the catalog entry means the composer and the generator
never disagree about what a style is.

Usage Example
-------------
    >>> from snapstudio.core.catalog import StylePreset, get_style_definition
    >>> definition = get_style_definition(StylePreset.REMOVE_BG)
    >>> definition.accepts_reference
    False
"""

from dataclasses import dataclass
from enum import Enum


class StylePreset(str, Enum):
    """Identifiers of every available style preset."""

    FREE_EDIT = "FREE_EDIT"
    DEVELOPER_PRO = "DEVELOPER_PRO"
    CODING_HOLOGRAM = "CODING_HOLOGRAM"
    FILES_3D_RENDER = "FILES_3D_RENDER"
    SMARTPHONE_PHOTO = "SMARTPHONE_PHOTO"
    TECH_ACCESSORIES = "TECH_ACCESSORIES"
    SMART_AD = "SMART_AD"
    IMAGINE_V5 = "IMAGINE_V5"
    PURE_CREATION = "PURE_CREATION"
    SHOES_ELEGANCE = "SHOES_ELEGANCE"
    FASHION_CLOTHING = "FASHION_CLOTHING"
    FOOD_PHOTOGRAPHY = "FOOD_PHOTOGRAPHY"
    REMOVE_BG = "REMOVE_BG"
    PORTRAIT = "PORTRAIT"
    VINTAGE = "VINTAGE"
    HYPER_REAL = "HYPER_REAL"
    MINIMALIST = "MINIMALIST"
    SOCIAL_MEDIA = "SOCIAL_MEDIA"
    THREE_D = "THREE_D"
    OCTANE = "OCTANE"
    NATURE = "NATURE"
    LUXURY = "LUXURY"
    AD_FANTASY = "AD_FANTASY"
    UPSCALE = "UPSCALE"


class PromptMode(str, Enum):
    """How the prompt composer builds the instruction for a style."""

    FIXED = "fixed"  # Hardcoded instruction, ignores every parameter
    TEXT_TO_IMAGE = "text-to-image"  # Creative generation from the description only
    TEMPLATE = "template"  # Hardcoded domain template
    OPTIMIZED = "optimized"  # Delegated to the remote text model


class SceneTask(str, Enum):
    """Task description the scene generator sends with the images."""

    UPSCALE = "upscale"
    REMOVE_BACKGROUND = "remove-background"
    TEXT_TO_IMAGE = "text-to-image"
    FILES_3D = "files-3d"
    FREE_EDIT = "free-edit"
    SCENE_REPLACEMENT = "scene-replacement"


@dataclass(frozen=True)
class StyleDefinition:
    """Display metadata and capabilities of one style preset."""

    label: str
    icon: str
    prompt_suffix: str
    prompt_mode: PromptMode = PromptMode.OPTIMIZED
    scene_task: SceneTask = SceneTask.SCENE_REPLACEMENT

    @property
    def is_text_to_image(self) -> bool:
        """True if the style generates from text alone (no source image needed)."""
        return self.scene_task == SceneTask.TEXT_TO_IMAGE

    @property
    def accepts_reference(self) -> bool:
        """True if a reference image is forwarded to the image model."""
        return self.scene_task != SceneTask.REMOVE_BACKGROUND

    @property
    def uses_remote_optimizer(self) -> bool:
        """True if the prompt is produced by the remote text model."""
        return self.prompt_mode == PromptMode.OPTIMIZED

    @property
    def display_name(self) -> str:
        """Icon and label, as shown in the style selector."""
        return f"{self.icon} {self.label}"


STYLE_DEFINITIONS: dict[StylePreset, StyleDefinition] = {
    StylePreset.FREE_EDIT: StyleDefinition(
        label="تعديل حر (Magic Edit)",
        icon="🪄",
        prompt_suffix=(
            "Creative Image Editing based on user prompt. "
            "Freedom to modify subject and environment."
        ),
        prompt_mode=PromptMode.TEMPLATE,
        scene_task=SceneTask.FREE_EDIT,
    ),
    StylePreset.FILES_3D_RENDER: StyleDefinition(
        label="تجسيم ملفات 3D",
        icon="📂✨",
        prompt_suffix=(
            "3D Isometric Render of Files and Folders, Claymorphism, Blender Style, "
            "Floating Elements, Frosted Glass, Cute 3D Icons."
        ),
        prompt_mode=PromptMode.TEMPLATE,
        scene_task=SceneTask.FILES_3D,
    ),
    StylePreset.CODING_HOLOGRAM: StyleDefinition(
        label="سحر الأكواد (هولوغرام)",
        icon="💻✨",
        prompt_suffix=(
            "Futuristic Laptop Photography, Holographic Code Flow, Glowing Data Streams, "
            "3D Floating Syntax, Volumetric Lighting, High-End Tech Ad."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.IMAGINE_V5: StyleDefinition(
        label="تخيل جنوني (من الصفر)",
        icon="🌌",
        prompt_suffix=(
            "Pure Text-to-Image Generation. "
            "Create a mind-bending, futuristic, high-tech masterpiece."
        ),
        prompt_mode=PromptMode.TEXT_TO_IMAGE,
        scene_task=SceneTask.TEXT_TO_IMAGE,
    ),
    StylePreset.PURE_CREATION: StyleDefinition(
        label="تخيل مشهد (واقعي/حر)",
        icon="🎨",
        prompt_suffix=(
            "Pure Text-to-Image. Photorealistic, High-End Production, "
            "Cinematic Composition, Natural Details."
        ),
        prompt_mode=PromptMode.TEXT_TO_IMAGE,
        scene_task=SceneTask.TEXT_TO_IMAGE,
    ),
    StylePreset.SMARTPHONE_PHOTO: StyleDefinition(
        label="تصوير هواتف (Tech)",
        icon="📱",
        prompt_suffix=(
            "High-End Tech Product Photography, Sleek Smartphone Presentation, "
            "Screen Reflection, Glossy Finish, Futuristic Lighting, Clean Surface."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.TECH_ACCESSORIES: StyleDefinition(
        label="اكسسوارات تقنية",
        icon="🎧",
        prompt_suffix=(
            "Professional Tech Accessories Photography. Headphones, Watches, Cases. "
            "Focus on Materials (Silicone, Mesh, Leather, Metal). Clean Studio Lighting."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.SHOES_ELEGANCE: StyleDefinition(
        label="أحذية فاخرة (Sneakers)",
        icon="👟",
        prompt_suffix=(
            "Professional Shoe Photography, Hypebeast Style, Dynamic Floating or Concrete "
            "Surface, Sharp Focus on Texture/Fabric, Commercial Lighting."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.FASHION_CLOTHING: StyleDefinition(
        label="أزياء وملابس (Fashion)",
        icon="👗",
        prompt_suffix=(
            "High Fashion Editorial, Vogue Style, Focus on Fabric Drape and Texture, "
            "Professional Model or Mannequin, Neutral Luxury Background."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.FOOD_PHOTOGRAPHY: StyleDefinition(
        label="تصوير أطعمة (Food)",
        icon="🍩",
        prompt_suffix=(
            "Professional Food Photography, Culinary Magazine Style, Macro Details, "
            "Appetizing, Freshness, Crumbs, Steam."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.DEVELOPER_PRO: StyleDefinition(
        label="محترف برمجيات (شخصي)",
        icon="👨‍💻",
        prompt_suffix=(
            "Masterpiece portrait of a software engineer, futuristic setup, "
            "holographic screens, matrix code, cyber atmosphere."
        ),
        prompt_mode=PromptMode.TEMPLATE,
    ),
    StylePreset.SMART_AD: StyleDefinition(
        label="إعلان ذكي (منتجات)",
        icon="🧠",
        prompt_suffix="Analyze the product category. Generate a suitable commercial background.",
    ),
    StylePreset.REMOVE_BG: StyleDefinition(
        label="تفريغ الخلفية",
        icon="✂️",
        prompt_suffix=(
            "Solid white background #FFFFFF. Product isolation. No shadows, no props. "
            "Pure clean studio cutout style."
        ),
        prompt_mode=PromptMode.FIXED,
        scene_task=SceneTask.REMOVE_BACKGROUND,
    ),
    StylePreset.UPSCALE: StyleDefinition(
        label="رفع الدقة فقط",
        icon="⚡",
        prompt_suffix=(
            "high fidelity, 4k upscaling, sharpen details, denoise, preserve original background"
        ),
        prompt_mode=PromptMode.FIXED,
        scene_task=SceneTask.UPSCALE,
    ),
    StylePreset.AD_FANTASY: StyleDefinition(
        label="إعلان خيالي",
        icon="✨",
        prompt_suffix=(
            "surreal advertising masterpiece, defying gravity, magical atmosphere, electric energy"
        ),
    ),
    StylePreset.PORTRAIT: StyleDefinition(
        label="بورتريه",
        icon="👤",
        prompt_suffix="portrait photography, bokeh background, focus on product",
    ),
    StylePreset.VINTAGE: StyleDefinition(
        label="كلاسيكي",
        icon="📻",
        prompt_suffix="vintage aesthetic, retro styling, warm film grain",
    ),
    StylePreset.HYPER_REAL: StyleDefinition(
        label="واقعي جداً",
        icon="👁️",
        prompt_suffix="hyper-realistic, 8k resolution, sharp focus",
    ),
    StylePreset.MINIMALIST: StyleDefinition(
        label="بسيط",
        icon="⬜",
        prompt_suffix="minimalist design, clean solid background, modern",
    ),
    StylePreset.SOCIAL_MEDIA: StyleDefinition(
        label="سوشيال ميديا",
        icon="📱",
        prompt_suffix="instagram aesthetic, bright colors, lifestyle setting",
    ),
    StylePreset.THREE_D: StyleDefinition(
        label="ثلاثي الأبعاد",
        icon="🧊",
        prompt_suffix="3D render style, perfect geometry, soft shadows",
    ),
    StylePreset.OCTANE: StyleDefinition(
        label="سينمائي",
        icon="🎬",
        prompt_suffix="cinematic lighting, octane render, dramatic atmosphere",
    ),
    StylePreset.NATURE: StyleDefinition(
        label="طبيعة",
        icon="🌿",
        prompt_suffix="surrounded by nature, organic elements, sunlight",
    ),
    StylePreset.LUXURY: StyleDefinition(
        label="فاخر",
        icon="💎",
        prompt_suffix="luxury setting, black marble, gold accents, premium",
    ),
}


def get_style_definition(style: StylePreset | str) -> StyleDefinition:
    """Look up the catalog entry for a style.

    Args:
        style: StylePreset member or its identifier (e.g. "REMOVE_BG")

    Returns:
        The style's StyleDefinition

    Raises:
        KeyError: If the style is not in the catalog
    """
    try:
        preset = StylePreset(style)
    except ValueError as e:
        available = ", ".join(s.value for s in StylePreset)
        raise KeyError(f"Style preset '{style}' not found. Available styles: {available}") from e
    return STYLE_DEFINITIONS[preset]


def styles_by_mode(mode: PromptMode) -> list[StylePreset]:
    """List the styles whose prompt is built in the given mode."""
    return [style for style, definition in STYLE_DEFINITIONS.items() if definition.prompt_mode == mode]


def text_to_image_styles() -> list[StylePreset]:
    """List the styles that need no source image."""
    return [style for style, definition in STYLE_DEFINITIONS.items() if definition.is_text_to_image]
