"""Photographic option enumerations.

Every option is a ``str`` enum whose value is the human-readable label shown
in the UI. The labels are mostly Arabic with an English hint in parentheses;
they are interpolated into prompts as-is and the remote prompt optimizer
translates them to English camera and lighting terminology.

Always use ``.value`` when interpolating a member into text.
"""

from enum import Enum


class CameraAngle(str, Enum):
    EYE_LEVEL = "مستوى العين (طبيعي)"
    LOW_ANGLE = "زاوية سفلية (Hero)"
    TOP_DOWN = "من الأعلى (Flat Lay)"
    RIGHT_SIDE = "من اليمين"
    LEFT_SIDE = "من اليسار"
    BACK = "من الخلف"


class CameraDistance(str, Enum):
    MACRO = "ماكرو (تقريب فائق للتفاصيل)"
    CLOSE_UP = "قريب جداً (Close Up)"
    MEDIUM_CLOSE = "متوسط القرب (Portrait)"
    MEDIUM = "مسافة متوسطة (Medium Shot)"
    FULL_SHOT = "لقطة كاملة (Full Body)"
    LONG_SHOT = "بعيد (مع الخلفية)"
    EXTREME_LONG_SHOT = "بعيد جداً (منظر عام)"


class LightingPreset(str, Enum):
    NONE = "تلقائي (Auto)"
    SOFTBOX = "إضاءة استوديو ناعمة (Softbox)"
    RIM = "إضاءة خلفية (Rim Light)"
    SPOTLIGHT = "إضاءة مركزة (Spotlight)"
    AMBIENT = "إضاءة محيطية هادئة"
    NEON = "نيون (Cyberpunk)"
    SUNLIGHT = "ضوء شمس طبيعي"
    DRAMATIC = "سينمائي درامي"


class SubjectPose(str, Enum):
    DEFAULT = "تلقائي (حسب الصورة)"
    SITTING_DESK = "جالس على كرسي مكتب (عمل)"
    STANDING_CONFIDENT = "واقف بثقة (Presentation)"
    FULL_BODY = "صورة كاملة للجسم (Full Body)"
    CLOSE_UP = "صورة قريبة للوجه (Headshot)"
    LOW_ANGLE_HERO = "زاوية بطولية من الأسفل"
    SIDE_PROFILE = "بروفايل جانبي"
    BUSY_TYPING = "منهمك في الكتابة (Coding)"
    WIDE_SHOT = "لقطة واسعة مع المحيط"
    FLOATING_SHOE = "حذاء طائر (ديناميكي)"
    ON_PEDESTAL = "على منصة عرض"
    FASHION_WALK = "مشية عارض أزياء"
    PHONE_HAND_HELD = "ممسوك باليد (In Hand)"
    PHONE_FLAT_LAY = "موضوع على طاولة (Flat)"


class FaceDirection(str, Enum):
    CAMERA = "نظر للكاميرا مباشرة (Eye Contact)"
    AWAY = "نظر بعيداً (شارد / Candid)"
    LEFT = "نظر لجهة اليسار"
    RIGHT = "نظر لجهة اليمين"
    UP = "نظر للأعلى (إلهام/تفكير)"
    DOWN = "نظر للأسفل (تركيز/عمل)"
    SCREEN = "نظر للشاشة (للمبرمجين)"
    CLOSED = "مغمض العينين (تأمل)"


class Resolution(str, Enum):
    FHD = "دقة عالية (FHD)"
    QHD = "دقة فائقة (2K)"
    UHD = "دقة سينمائية (4K)"


class AspectRatio(str, Enum):
    SQUARE = "1:1 (مربع)"
    PORTRAIT = "4:5 (بورتريه)"
    STORY = "9:16 (ستوري)"
    LANDSCAPE = "16:9 (عريض)"
    WIDE = "2:1 (سينمائي)"


class SocialPlatform(str, Enum):
    INSTAGRAM_POST = "Instagram Post"
    INSTAGRAM_PORTRAIT = "Instagram Portrait"
    INSTAGRAM_STORY = "Story / TikTok"
    YOUTUBE_THUMBNAIL = "YouTube Thumbnail"
    FACEBOOK_COVER = "Facebook Cover"
    TWITTER_POST = "Twitter / X Post"


SOCIAL_PLATFORM_ASPECT_RATIOS: dict[SocialPlatform, AspectRatio] = {
    SocialPlatform.INSTAGRAM_POST: AspectRatio.SQUARE,
    SocialPlatform.INSTAGRAM_PORTRAIT: AspectRatio.PORTRAIT,
    SocialPlatform.INSTAGRAM_STORY: AspectRatio.STORY,
    SocialPlatform.YOUTUBE_THUMBNAIL: AspectRatio.LANDSCAPE,
    SocialPlatform.FACEBOOK_COVER: AspectRatio.LANDSCAPE,
    SocialPlatform.TWITTER_POST: AspectRatio.LANDSCAPE,
}


def aspect_ratio_for_platform(platform: SocialPlatform | str) -> AspectRatio:
    """Return the aspect ratio preset for a social platform.

    Args:
        platform: SocialPlatform member or its label

    Returns:
        Matching AspectRatio

    Raises:
        ValueError: If the label is not a known platform
    """
    return SOCIAL_PLATFORM_ASPECT_RATIOS[SocialPlatform(platform)]


def aspect_ratio_code(ratio: AspectRatio | str) -> str:
    """Return the bare ratio code of an aspect ratio label (e.g. ``"16:9"``)."""
    return AspectRatio(ratio).value.split(" ", 1)[0]


# UI defaults
DEFAULT_ANGLE = CameraAngle.EYE_LEVEL
DEFAULT_DISTANCE = CameraDistance.MEDIUM
DEFAULT_LIGHTING = LightingPreset.SOFTBOX
DEFAULT_RESOLUTION = Resolution.FHD
DEFAULT_POSE = SubjectPose.DEFAULT
DEFAULT_FACE_DIRECTION = FaceDirection.CAMERA
DEFAULT_ASPECT_RATIO = AspectRatio.SQUARE
