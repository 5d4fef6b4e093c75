"""
Curated AI tool catalog.

Each tool is authored as a brief definition (name, category, one-line
description, website). build_tool_records() expands the definitions into full
ToolRecords with generated copy, pricing and platforms. Tools listed in
DETAILED_TOOLS carry hand-written fields that replace the generated ones.
"""
from typing import Any, NamedTuple

from schemas.catalog import ToolRecord
from services.utils import slugify


class ToolDefinition(NamedTuple):
    """Brief, hand-authored tool entry."""

    name: str
    category: str
    brief_description: str
    website: str | None = None


TOOL_DEFINITIONS: list[ToolDefinition] = [
    ToolDefinition("ChatGPT", "AI Chat & Assistant", "OpenAI's versatile chatbot for conversation, writing, and tasks.", "https://chat.openai.com"),
    ToolDefinition("Grok 4", "AI Chat & Assistant", "xAI's advanced model for reasoning and queries.", "https://grok.x.ai"),
    ToolDefinition("Claude 4", "AI Chat & Assistant", "Anthropic's safe, helpful AI assistant.", "https://claude.ai"),
    ToolDefinition("Gemini AI", "AI Chat & Assistant", "Google's multimodal AI for search and creation.", "https://gemini.google.com"),
    ToolDefinition("Microsoft Copilot", "AI Chat & Assistant", "Integrated AI for productivity in Microsoft apps.", "https://copilot.microsoft.com"),
    ToolDefinition("Stable Diffusion 3.5", "Image Generators", "Open-source AI for generating high-quality images from text.", "https://stability.ai"),
    ToolDefinition("Leonardo AI", "Image Generators", "AI art generator with fine-tuned models.", "https://leonardo.ai"),
    ToolDefinition("Adobe Firefly 3", "Image Generators", "Adobe's ethical AI for image creation and editing.", "https://firefly.adobe.com"),
    ToolDefinition("Ideogram 3.0", "Image Generators", "Text-to-image AI with creative styles.", "https://ideogram.ai"),
    ToolDefinition("Luma Dream Machine", "Video Generators", "AI for generating dream-like videos from prompts.", "https://lumalabs.ai/dream-machine"),
    ToolDefinition("Sora 2", "Video Generators", "OpenAI's text-to-video model for realistic clips.", "https://openai.com/sora"),
    ToolDefinition("Runway Gen-4", "Video Generators", "Advanced AI video generation and editing.", "https://runway.com"),
    ToolDefinition("Kling 2.6", "Video Generators", "Kwai's high-resolution video AI.", "https://klingai.com"),
    ToolDefinition("ElevenLabs", "Text To Speech", "Realistic AI voice generation with cloning.", "https://elevenlabs.io"),
    ToolDefinition("Murf.AI", "Text To Speech", "Professional voiceovers with natural tones.", "https://murf.ai"),
    ToolDefinition("Uberduck", "Text To Speech", "Fun AI voices for music and speech.", "https://uberduck.ai"),
    ToolDefinition("QuillBot", "Writing & Web SEO", "AI paraphraser and grammar checker.", "https://quillbot.com"),
    ToolDefinition("Jasper", "Writing & Web SEO", "AI content writer for marketing and blogs.", "https://jasper.ai"),
    ToolDefinition("Rytr", "Writing & Web SEO", "Affordable AI for generating copy.", "https://rytr.me"),
    ToolDefinition("WriteSonic", "Writing & Web SEO", "Versatile AI writer with SEO tools.", "https://writesonic.com"),
    ToolDefinition("Notion AI", "Productivity", "Integrated AI for notes, summaries, and organization.", "https://notion.so"),
    ToolDefinition("ClickUp", "Project Management", "AI-enhanced task management and automation.", "https://clickup.com"),
    ToolDefinition("Semrush One", "SEO", "AI for visibility optimization on search and AI engines.", "https://semrush.com"),
    ToolDefinition("GPTZero", "AI Detection", "Detector for AI-generated content.", "https://gptzero.me"),
    ToolDefinition("Undetectable AI", "AI Detection", "Tool to humanize AI text.", "https://undetectable.ai"),
    ToolDefinition("Character AI", "AI Chat & Assistant", "Create and chat with custom AI characters.", "https://character.ai"),
    ToolDefinition("AI Dungeon", "Storytelling Generator", "Interactive AI storytelling game.", "https://aidungeon.com"),
    ToolDefinition("Deep Swap AI", "Face Swap", "AI for swapping faces in media.", "https://deepswap.ai"),
    ToolDefinition("CapCut", "Video Edition", "AI-powered video editor with effects.", "https://capcut.com"),
    ToolDefinition("Photoshop AI", "Image Editing", "Adobe's generative fill and edits.", "https://adobe.com/photoshop"),
    ToolDefinition("Canva AI", "Websites & Design", "Magic Studio for AI design assistance.", "https://canva.com"),
    ToolDefinition("Framer AI", "Websites & Design", "AI for building interactive sites.", "https://framer.com"),
    ToolDefinition("Klaviyo", "E-mail", "AI email automation for e-commerce.", "https://klaviyo.com"),
    ToolDefinition("HoppyCopy", "E-mail", "AI copywriter for emails.", "https://hoppycopy.co"),
    ToolDefinition("Looka", "Logo Creation", "Instant AI logo design.", "https://looka.com"),
    ToolDefinition("Namelix", "E-commerce", "AI business name generator.", "https://namelix.com"),
    ToolDefinition("AIApply", "Human Resources", "AI for job applications.", "https://aiapply.co"),
    ToolDefinition("Teal Resume Builder", "Human Resources", "AI-optimized resumes.", "https://tealhq.com"),
    ToolDefinition("PimEyes", "AI Detection", "Reverse image search for faces.", "https://pimeyes.com"),
    ToolDefinition("Copyleaks", "AI Detection", "Plagiarism and AI detector.", "https://copyleaks.com"),
    ToolDefinition("Veo 3.1", "Video Generators", "Google's advanced video AI.", "https://deepmind.google/veo"),
    ToolDefinition("Hailuo AI", "Video Generators", "Text-to-video with high fidelity.", "https://hailuoai.com"),
    ToolDefinition("OpenVoice AI", "Text To Speech", "Instant voice cloning.", "https://openvoice.ai"),
    ToolDefinition("LanguageTool", "Writing & Web SEO", "Multilingual grammar AI.", "https://languagetool.org"),
    ToolDefinition("Mem AI", "Memory", "AI note-taking and recall.", "https://mem.ai"),
    ToolDefinition("QuizLet", "Memory", "AI flashcards for learning.", "https://quizlet.com"),
    ToolDefinition("Tattoos AI", "Life Assistants", "Generate tattoo designs.", "https://tattoos.ai"),
    ToolDefinition("AI HairStyles", "Life Assistants", "Try virtual hairstyles.", "https://aihairstyles.com"),
    ToolDefinition("Replit AI", "Assistant Code", "AI coding help in Replit.", "https://replit.com"),
    ToolDefinition("Visily AI", "Design", "AI UI/UX design tool.", "https://visily.ai"),
    ToolDefinition("Aimy Ads", "Advertising", "AI campaign manager for ads.", "https://aimyads.com"),
    ToolDefinition("Vidmage", "Face Swap", "Multi-face swap in media.", "https://vidmage.com"),
    ToolDefinition("Lip Sync Studio", "Video", "AI lip syncing for videos.", "https://lipsyncstudio.com"),
    ToolDefinition("Dechecker", "AI Detection", "Content authenticity checker.", "https://dechecker.io"),
    ToolDefinition("AdMakeAI", "Marketing", "AI ad creation tool.", "https://admakeai.com"),
    ToolDefinition("HitPaw VikPea", "Image Editing", "AI photo enhancer.", "https://hitpaw.com"),
    ToolDefinition("GPT-5.2", "LLM Models", "Advanced OpenAI model.", "https://openai.com"),
    ToolDefinition("PixPretty AI Photo Editor", "Image Editing", "Easy AI edits.", "https://pixpretty.com"),
    ToolDefinition("Freudly AI Therapist", "Healthcare", "AI mental health support.", "https://freudly.ai"),
    ToolDefinition("Product Link To Video", "Video", "AI videos from product URLs.", "https://productlinktovideo.com"),
    ToolDefinition("Seedream 4.5", "Image Generators", "Dream-like image AI.", "https://seedream.ai"),
    ToolDefinition("Live Avatar Alibaba", "Avatars", "Real-time AI avatars.", "https://alibaba.com/avatar"),
    ToolDefinition("Meta Movie Gen", "Video Generators", "Meta's film-style video AI.", "https://meta.com/moviegen"),
    ToolDefinition("Human or Not 2", "Games", "AI vs. human detection game.", "https://humanornot.ai"),
    ToolDefinition("ArtFlow AI", "Art", "Creative AI art flows.", "https://artflow.ai"),
    ToolDefinition("Wan2.5", "Video Generators", "Fast AI video generation.", "https://wan.video"),
    ToolDefinition("DeepFakesWeb", "Face Swap", "Web-based deepfake tool.", "https://deepfakesweb.com"),
    ToolDefinition("ATS Resume Checker", "Human Resources", "AI resume optimizer for ATS.", "https://atsresumechecker.com"),
    ToolDefinition("Semrush Content Toolkit", "Writing & Web SEO", "SEO-focused content AI.", "https://semrush.com/content"),
    ToolDefinition("Free AI Content Writer", "Writing & Web SEO", "HubSpot's free writer.", "https://hubspot.com/ai-writer"),
    ToolDefinition("Qwen 3", "AI Chat & Assistant", "Alibaba's open LLM.", "https://qwen.alibaba.com"),
    ToolDefinition("DeepSeek-R1", "AI Chat & Assistant", "Efficient AI model.", "https://deepseek.com"),
    ToolDefinition("Kimi.ai", "AI Chat & Assistant", "Multimodal Chinese AI.", "https://kimi.ai"),
    ToolDefinition("Le Chat by Mistral AI", "AI Chat & Assistant", "Mistral's conversational AI.", "https://chat.mistral.ai"),
    ToolDefinition("Amazon Nova", "AI Chat & Assistant", "Amazon's enterprise AI.", "https://aws.amazon.com/nova"),
    ToolDefinition("InVideo", "Video Generators", "Easy AI video maker.", "https://invideo.io"),
    ToolDefinition("FreeTTS", "Text To Speech", "Open-source TTS.", "https://freetts.com"),
    ToolDefinition("Hailuo AI Audio", "Text To Speech", "Audio generation AI.", "https://hailuoai.audio"),
    ToolDefinition("Audiobox by Meta", "Audio Editing", "Meta's sound design AI.", "https://audiobox.meta.com"),
    ToolDefinition("Speech Synthesis", "Text To Speech", "Custom voice synthesis.", "https://speechsynthesis.ai"),
    ToolDefinition("Play HT", "Text To Speech", "High-quality AI voices.", "https://play.ht"),
    ToolDefinition("Hostinger AI Hub", "E-commerce", "AI tools for hosting/e-com.", "https://hostinger.com/ai"),
    ToolDefinition("Adcreative AI by Semrush", "E-commerce", "AI ad creatives.", "https://adcreative.ai"),
    ToolDefinition("Magic by Shopify", "E-commerce", "Shopify's AI enhancements.", "https://shopify.com/magic"),
    ToolDefinition("Free AI Chatbot Builder", "E-commerce", "HubSpot chatbot.", "https://hubspot.com/chatbot"),
    ToolDefinition("Leffa", "E-commerce", "Virtual try-on for clothes.", "https://leffa.ai"),
    ToolDefinition("Pokecut", "E-commerce", "AI background remover.", "https://pokecut.com"),
    ToolDefinition("Waymark", "E-commerce", "AI video ads for marketing.", "https://waymark.com"),
    ToolDefinition("PhotoG", "E-commerce", "Product photo AI.", "https://photog.ai"),
    ToolDefinition("FaceCheck ID", "AI Detection", "Face verification AI.", "https://facecheck.id"),
    ToolDefinition("DeepFake Detector", "AI Detection", "Spot deepfakes.", "https://deepfakedetector.ai"),
    ToolDefinition("Humanize AI Tools", "AI Detection", "Make AI text human-like.", "https://humanize.ai"),
    ToolDefinition("Clever AI Humanizer", "AI Detection", "Advanced text humanizer.", "https://cleveraihumanizer.com"),
    ToolDefinition("ZeroGPT", "AI Detection", "Free AI detector.", "https://zerogpt.com"),
    ToolDefinition("JobCopilot", "Human Resources", "AI job search assistant.", "https://jobcopilot.com"),
    ToolDefinition("RemotePeople", "Human Resources", "AI for remote hiring.", "https://remotepeople.io"),
    ToolDefinition("Workleap", "Human Resources", "HR process AI.", "https://workleap.com"),
    ToolDefinition("Leet Resumes", "Human Resources", "AI resume writing.", "https://leetresumes.com"),
    ToolDefinition("AI Career Coach", "Human Resources", "Personalized career advice.", "https://aicareercoach.com"),
    ToolDefinition("Resume Worded", "Human Resources", "Score and improve resumes.", "https://resumeworded.com"),
    ToolDefinition("Midjourney", "Image Generators", "AI art generation from text descriptions.", "https://midjourney.com"),
    ToolDefinition("DALL-E 3", "Image Generators", "OpenAI's image generation model.", "https://openai.com/dall-e-3"),
    ToolDefinition("GitHub Copilot", "Assistant Code", "AI pair programmer inside your editor.", "https://github.com/features/copilot"),
]

# Hand-written fields that replace the generated ones for flagship tools
DETAILED_TOOLS: dict[str, dict[str, Any]] = {
    "ChatGPT": {
        "tagline": "AI-powered conversational assistant",
        "short_description": (
            "ChatGPT is an advanced AI chatbot that can help with writing, coding, "
            "and answering questions."
        ),
        "description": (
            "ChatGPT is a state-of-the-art language model developed by OpenAI that can engage "
            "in natural conversations, write content, debug code, and much more."
        ),
        "pricing": "Free / $20/month",
        "pricing_type": ["Freemium"],
        "key_features": [
            "Natural conversation", "Code generation", "Content writing", "Problem solving",
        ],
        "pros": ["Very capable", "Easy to use", "Free tier available"],
        "cons": ["Can be inaccurate", "Requires internet"],
        "platforms": ["Web", "iOS", "Android"],
    },
    "Midjourney": {
        "tagline": "AI art generation from text",
        "short_description": (
            "Midjourney creates stunning images from text descriptions using advanced AI."
        ),
        "description": (
            "Midjourney is an independent research lab that produces an AI program that creates "
            "images from textual descriptions. It is one of the most popular AI art generators."
        ),
        "pricing": "$10-60/month",
        "pricing_type": ["Paid"],
        "key_features": [
            "Text-to-image", "High quality output", "Style variations", "Upscaling",
        ],
        "pros": ["Amazing quality", "Active community", "Regular updates"],
        "cons": ["Requires Discord", "No free tier", "Learning curve"],
        "platforms": ["Discord"],
        "featured": True,
    },
    "GitHub Copilot": {
        "tagline": "AI pair programmer",
        "short_description": (
            "GitHub Copilot suggests code and entire functions in real-time from your editor."
        ),
        "description": (
            "GitHub Copilot is an AI coding assistant that helps you write code faster by "
            "suggesting whole lines or entire functions right inside your editor."
        ),
        "pricing": "$10/month",
        "pricing_type": ["Paid"],
        "key_features": [
            "Code completion", "Multi-language support", "Context-aware suggestions",
            "IDE integration",
        ],
        "pros": ["Speeds up coding", "Learns your style", "Great documentation"],
        "cons": ["Subscription required", "Can suggest incorrect code"],
        "platforms": ["VS Code", "JetBrains", "Neovim"],
    },
    "Claude 4": {
        "tagline": "AI assistant by Anthropic",
        "short_description": "Claude is a helpful, harmless, and honest AI assistant.",
        "description": (
            "Claude is an AI assistant created by Anthropic to be helpful, harmless, and honest. "
            "It excels at analysis, coding, and creative tasks."
        ),
        "pricing": "Free / $20/month",
        "pricing_type": ["Freemium"],
        "key_features": [
            "Long context window", "Document analysis", "Coding assistance", "Safe responses",
        ],
        "pros": ["Very capable", "Large context", "Ethical design"],
        "cons": ["Limited free tier"],
        "platforms": ["Web"],
    },
    "DALL-E 3": {
        "tagline": "Advanced AI image generator",
        "description": (
            "DALL-E 3 is OpenAI's latest image generation model that can create highly "
            "detailed and accurate images from text prompts."
        ),
        "pricing": "Included with ChatGPT Plus",
        "pricing_type": ["Paid"],
        "key_features": [
            "Text-to-image", "High fidelity", "ChatGPT integration", "Prompt understanding",
        ],
        "pros": ["Excellent quality", "Easy to use", "Integrated with ChatGPT"],
        "cons": ["Requires subscription", "Content policy restrictions"],
        "platforms": ["Web", "API"],
    },
}

# ---------------------------------------------------------------------------
# Generated copy, keyed by category display name
# ---------------------------------------------------------------------------

CATEGORY_FEATURES: dict[str, list[str]] = {
    "AI Chat & Assistant": [
        "Natural language understanding", "Context-aware responses", "Multi-turn conversations",
        "Task automation", "Code generation",
    ],
    "Image Generators": [
        "Text-to-image generation", "Multiple art styles", "High-resolution output",
        "Style customization", "Batch generation",
    ],
    "Video Generators": [
        "Text-to-video creation", "Motion synthesis", "Scene generation", "Video editing",
        "HD/4K output",
    ],
    "Text To Speech": [
        "Natural voice synthesis", "Multiple languages", "Voice cloning", "Emotion control",
        "Audio export",
    ],
    "Writing & Web SEO": [
        "Content generation", "Grammar checking", "SEO optimization", "Tone adjustment",
        "Plagiarism detection",
    ],
    "AI Detection": [
        "AI content detection", "Authenticity scoring", "Detailed reports", "Batch analysis",
        "API integration",
    ],
    "Human Resources": [
        "Resume optimization", "ATS compatibility", "Interview prep", "Job matching",
        "Career insights",
    ],
    "E-commerce": [
        "Product descriptions", "Marketing copy", "Visual generation", "Analytics", "Automation",
    ],
}
DEFAULT_FEATURES = [
    "AI-powered automation",
    "User-friendly interface",
    "Fast processing",
    "Cloud-based access",
    "Regular updates",
]

CATEGORY_USE_CASES: dict[str, list[str]] = {
    "AI Chat & Assistant": [
        "Customer support automation", "Content brainstorming", "Code debugging",
        "Research assistance", "Personal productivity",
    ],
    "Image Generators": [
        "Marketing visuals", "Social media content", "Concept art", "Product mockups",
        "Creative projects",
    ],
    "Video Generators": [
        "Marketing videos", "Social media clips", "Explainer videos", "Product demos",
        "Educational content",
    ],
    "Text To Speech": [
        "Audiobook narration", "Video voiceovers", "Podcast production", "E-learning content",
        "Accessibility",
    ],
    "Writing & Web SEO": [
        "Blog post creation", "Product descriptions", "Email marketing", "Social media posts",
        "Website content",
    ],
    "AI Detection": [
        "Academic integrity", "Content verification", "Publishing quality control",
        "Hiring verification",
    ],
    "Human Resources": [
        "Resume building", "Job applications", "Interview preparation", "Career planning",
        "Skills assessment",
    ],
    "E-commerce": [
        "Product listings", "Ad creation", "Email campaigns", "Customer engagement",
        "Sales optimization",
    ],
}
DEFAULT_USE_CASES = [
    "Business automation",
    "Creative projects",
    "Personal productivity",
    "Team collaboration",
]

CATEGORY_TAGLINES: dict[str, str] = {
    "AI Chat & Assistant": "Your intelligent AI companion",
    "Image Generators": "Create stunning visuals with AI",
    "Video Generators": "Transform ideas into videos",
    "Text To Speech": "Give your text a voice",
    "Writing & Web SEO": "Write smarter, rank higher",
    "AI Detection": "Verify authenticity with AI",
    "Human Resources": "AI-powered career success",
    "E-commerce": "Boost sales with AI",
}

BASE_CONS = [
    "May require learning curve",
    "Premium features need subscription",
    "Results may vary",
]

# Indexed by name_hash(name) % len(PRICING_TYPES)
PRICING_TYPES: list[list[str]] = [
    ["Free", "Freemium"],
    ["Freemium"],
    ["Paid"],
    ["Free"],
    ["Freemium", "Paid"],
]

PLATFORMS = ["Web", "iOS", "Android", "API"]

# Tools highlighted on the home page
FEATURED_KEYWORDS = ("ChatGPT", "Claude", "Gemini")


def name_hash(name: str) -> int:
    """Stable per-name number used to vary generated fields between tools."""
    return sum(ord(char) for char in name)


def generate_key_features(category: str) -> list[str]:
    """Feature list for a category."""
    return list(CATEGORY_FEATURES.get(category, DEFAULT_FEATURES))


def generate_pros(category: str) -> list[str]:
    """Pros list mentioning the category."""
    return [
        f"Excellent {category.lower()} capabilities",
        "Easy to use interface",
        "Fast output generation",
        "Regular feature updates",
    ]


def generate_cons() -> list[str]:
    """Cons shared by generated tools."""
    return list(BASE_CONS)


def generate_use_cases(category: str) -> list[str]:
    """Use-case list for a category."""
    return list(CATEGORY_USE_CASES.get(category, DEFAULT_USE_CASES))


def generate_tagline(category: str) -> str:
    """Short tagline for a category."""
    return CATEGORY_TAGLINES.get(category, f"AI-powered {category.lower()}")


def generate_description(name: str, category: str, brief: str) -> str:
    """Long-form description built around the one-line brief."""
    return (
        f"{name} is a powerful AI tool in the {category} category. {brief}\n\n"
        "This tool leverages advanced artificial intelligence to help users achieve their "
        "goals more efficiently. Whether you're a professional, creator, or hobbyist, "
        f"{name} offers intuitive features designed to streamline your workflow.\n\n"
        "Key benefits include time savings, improved output quality, and access to "
        "cutting-edge AI technology. The tool is designed with user experience in mind, "
        "making it accessible to both beginners and experts.\n\n"
        f"{name} continues to be updated with new features and improvements, ensuring users "
        "always have access to the latest AI capabilities."
    )


def get_pricing_type(name: str) -> list[str]:
    """Pricing model, chosen from PRICING_TYPES by name hash."""
    return list(PRICING_TYPES[name_hash(name) % len(PRICING_TYPES)])


def get_pricing(pricing_type: list[str]) -> str:
    """Human-readable pricing text for a pricing model."""
    if pricing_type == ["Free"]:
        return "Free"
    if "Freemium" in pricing_type:
        return "Free tier available, Pro from $12/month"
    return "Starting at $19/month"


def get_platforms(name: str) -> list[str]:
    """Two to four platforms, chosen by name hash."""
    return PLATFORMS[: 2 + name_hash(name) % 3]


def build_tool_record(definition: ToolDefinition) -> ToolRecord:
    """Expand a brief definition into a full ToolRecord."""
    name, category, brief, website = definition
    slug = slugify(name)
    pricing_type = get_pricing_type(name)
    fields: dict[str, Any] = {
        "name": name,
        "slug": slug,
        "category": category,
        "tagline": generate_tagline(category),
        "short_description": brief,
        "description": generate_description(name, category, brief),
        "website": website or f"https://{slug}.com",
        "pricing": get_pricing(pricing_type),
        "pricing_type": pricing_type,
        "price_range": "Free" if "Free" in pricing_type else "$10-50/month",
        "free_trial": "Free" in pricing_type or "Freemium" in pricing_type,
        "key_features": generate_key_features(category),
        "pros": generate_pros(category),
        "cons": generate_cons(),
        "use_cases": generate_use_cases(category),
        "platforms": get_platforms(name),
        "verified": True,
        "still_active": True,
        "featured": any(keyword in name for keyword in FEATURED_KEYWORDS),
        "seo_title": f"{name} - {category} | FindMyAI",
        "seo_meta_description": (
            f"{brief} Compare features, pricing, and alternatives on FindMyAI."
        ),
    }
    fields.update(DETAILED_TOOLS.get(name, {}))
    return ToolRecord(**fields)


def build_tool_records(
    definitions: list[ToolDefinition] | None = None,
) -> list[ToolRecord]:
    """Expand every definition (defaults to TOOL_DEFINITIONS)."""
    if definitions is None:
        definitions = TOOL_DEFINITIONS
    return [build_tool_record(definition) for definition in definitions]
