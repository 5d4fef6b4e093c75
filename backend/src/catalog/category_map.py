"""
Curated category keyword maps.

Used when CATEGORY_MATCH_MODE=keyword: a tool in a category is also connected
to every job, task or tag listed here for that category, on top of the exact
category matches. Keys are category slugs; values are job/task slugs or tag
names. Entries naming a job, task or tag that is not seeded are skipped.
"""

CATEGORY_TO_JOBS: dict[str, list[str]] = {
    "ai-chat-assistant": ["software-developer", "content-creator", "researcher", "entrepreneur-solopreneur", "student-learner", "consultant"],
    "image-generators": ["graphic-designer", "content-creator", "digital-marketer", "social-media-manager", "blogger-influencer", "ux-ui-designer"],
    "video-generators": ["video-editor-creator", "content-creator", "digital-marketer", "social-media-manager", "podcaster"],
    "text-to-speech": ["content-creator", "podcaster", "educator-teacher", "video-editor-creator"],
    "writing-web-seo": ["writer-author", "copywriter", "content-creator", "blogger-influencer", "seo-specialist", "digital-marketer"],
    "productivity": ["entrepreneur-solopreneur", "project-manager", "freelancer", "administrative-assistant", "consultant"],
    "project-management": ["project-manager", "entrepreneur-solopreneur", "product-manager"],
    "seo": ["seo-specialist", "digital-marketer", "blogger-influencer", "content-creator"],
    "ai-detection": ["educator-teacher", "writer-author", "content-creator", "journalist"],
    "storytelling-generator": ["writer-author", "content-creator", "game-developer"],
    "face-swap": ["content-creator", "video-editor-creator", "social-media-manager"],
    "video-edition": ["video-editor-creator", "content-creator", "social-media-manager", "podcaster"],
    "image-editing": ["photographer", "graphic-designer", "content-creator", "social-media-manager", "digital-marketer"],
    "websites-design": ["ux-ui-designer", "graphic-designer", "entrepreneur-solopreneur", "digital-marketer", "freelancer"],
    "e-mail": ["digital-marketer", "sales-professional", "ecommerce-owner", "freelancer"],
    "logo-creation": ["graphic-designer", "entrepreneur-solopreneur", "freelancer", "digital-marketer"],
    "e-commerce": ["ecommerce-owner", "digital-marketer", "entrepreneur-solopreneur", "sales-professional"],
    "human-resources": ["hr-specialist", "freelancer", "student-learner"],
    "memory": ["student-learner", "researcher", "educator-teacher"],
    "life-assistants": ["freelancer", "entrepreneur-solopreneur"],
    "assistant-code": ["software-developer", "data-scientist", "game-developer"],
    "design": ["ux-ui-designer", "graphic-designer", "product-manager"],
    "advertising": ["digital-marketer", "social-media-manager", "ecommerce-owner"],
    "video": ["video-editor-creator", "content-creator", "digital-marketer"],
    "marketing": ["digital-marketer", "social-media-manager", "copywriter", "ecommerce-owner"],
    "llm-models": ["software-developer", "data-scientist", "researcher"],
    "healthcare": ["healthcare-professional", "therapist-counselor"],
    "avatars": ["content-creator", "digital-marketer", "video-editor-creator"],
    "games": ["game-developer", "content-creator"],
    "art": ["graphic-designer", "content-creator", "ux-ui-designer"],
    "audio-editing": ["podcaster", "musician-composer", "content-creator"],
}

CATEGORY_TO_TASKS: dict[str, list[str]] = {
    "ai-chat-assistant": ["text-generation", "brainstorming-ideas", "text-summarization", "code-writing", "research-synthesis"],
    "image-generators": ["image-generation", "graphic-design", "logo-design"],
    "video-generators": ["video-generation", "video-editing", "subtitle-generation"],
    "text-to-speech": ["voice-synthesis", "speech-transcription"],
    "writing-web-seo": ["text-generation", "content-writing", "seo-optimization", "grammar-checking"],
    "productivity": ["task-automation", "scheduling", "note-taking"],
    "project-management": ["task-automation", "scheduling"],
    "seo": ["seo-optimization", "content-writing", "lead-generation"],
    "ai-detection": ["plagiarism-detection", "grammar-checking"],
    "storytelling-generator": ["text-generation", "brainstorming-ideas"],
    "face-swap": ["face-swapping", "video-editing"],
    "video-edition": ["video-editing", "video-generation", "subtitle-generation"],
    "image-editing": ["image-editing", "background-removal", "image-generation"],
    "websites-design": ["website-building", "graphic-design"],
    "e-mail": ["email-marketing", "content-writing", "lead-generation"],
    "logo-creation": ["logo-design", "graphic-design"],
    "e-commerce": ["image-editing", "email-marketing", "personalized-recommendations", "virtual-try-on"],
    "human-resources": ["resume-building", "scheduling"],
    "memory": ["note-taking", "text-summarization"],
    "life-assistants": ["brainstorming-ideas", "scheduling"],
    "assistant-code": ["code-writing", "code-debugging"],
    "design": ["graphic-design", "website-building", "presentation-creation"],
    "advertising": ["image-generation", "content-writing", "lead-generation"],
    "video": ["video-editing", "video-generation"],
    "marketing": ["social-media-management", "email-marketing", "content-writing", "lead-generation"],
    "llm-models": ["text-generation", "code-writing", "text-summarization"],
    "healthcare": ["emotional-support", "brainstorming-ideas"],
    "avatars": ["video-generation", "voice-synthesis"],
    "games": ["brainstorming-ideas", "graphic-design"],
    "art": ["image-generation", "graphic-design"],
    "audio-editing": ["music-composition", "voice-synthesis", "speech-transcription"],
}

CATEGORY_TO_TAGS: dict[str, list[str]] = {
    "ai-chat-assistant": ["chatbot", "assistant"],
    "llm-models": ["chatbot", "llm"],
    "image-generators": ["text-to-image", "generative-art"],
    "art": ["generative-art"],
    "image-editing": ["photo-editing"],
    "video-generators": ["text-to-video"],
    "video-edition": ["video-editing"],
    "video": ["video-editing"],
    "text-to-speech": ["voice", "text-to-speech"],
    "audio-editing": ["voice"],
    "writing-web-seo": ["copywriting", "seo"],
    "seo": ["seo"],
    "assistant-code": ["coding"],
    "human-resources": ["careers"],
}
