"""Tags and the hand-picked tool/tag pairs applied by tasks.seed_tags."""
from schemas.catalog import TagAssignment, TagRecord

TAGS: list[TagRecord] = [
    TagRecord(name="chatbot", category="ai-chat-assistant"),
    TagRecord(name="assistant"),
    TagRecord(name="llm", category="llm-models"),
    TagRecord(name="text-to-image", category="image-generators"),
    TagRecord(name="generative-art", category="art"),
    TagRecord(name="photo-editing", category="image-editing"),
    TagRecord(name="text-to-video", category="video-generators"),
    TagRecord(name="video-editing", category="video-edition"),
    TagRecord(name="voice", category="text-to-speech"),
    TagRecord(name="text-to-speech", category="text-to-speech"),
    TagRecord(name="copywriting", category="writing-web-seo"),
    TagRecord(name="seo", category="seo"),
    TagRecord(name="coding", category="assistant-code"),
    TagRecord(name="careers", category="human-resources"),
    TagRecord(name="ai-detection", category="ai-detection"),
    TagRecord(name="face-swap", category="face-swap"),
]

TAG_ASSIGNMENTS: list[TagAssignment] = [
    TagAssignment(tool_name="ChatGPT", tag_names=["chatbot"]),
]
