"""
Tool categories.

Slugs derive from the names. Tools, jobs, tasks and tags refer to categories by slug.
"""
from schemas.catalog import CategoryRecord

CATEGORIES: list[CategoryRecord] = [
    CategoryRecord(name="AI Chat & Assistant", featured=True),
    CategoryRecord(name="Image Generators", featured=True),
    CategoryRecord(name="Video Generators", featured=True),
    CategoryRecord(name="Text To Speech", featured=True),
    CategoryRecord(name="Writing & Web SEO", featured=True),
    CategoryRecord(name="Productivity", featured=True),
    CategoryRecord(name="Project Management", featured=False),
    CategoryRecord(name="SEO", featured=True),
    CategoryRecord(name="AI Detection", featured=True),
    CategoryRecord(name="Storytelling Generator", featured=False),
    CategoryRecord(name="Face Swap", featured=False),
    CategoryRecord(name="Video Edition", featured=False),
    CategoryRecord(name="Image Editing", featured=True),
    CategoryRecord(name="Websites & Design", featured=True),
    CategoryRecord(name="E-mail", featured=False),
    CategoryRecord(name="Logo Creation", featured=False),
    CategoryRecord(name="E-commerce", featured=True),
    CategoryRecord(name="Human Resources", featured=True),
    CategoryRecord(name="Memory", featured=False),
    CategoryRecord(name="Life Assistants", featured=False),
    CategoryRecord(name="Assistant Code", featured=True),
    CategoryRecord(name="Design", featured=True),
    CategoryRecord(name="Advertising", featured=False),
    CategoryRecord(name="Video", featured=False),
    CategoryRecord(name="Marketing", featured=True),
    CategoryRecord(name="LLM Models", featured=True),
    CategoryRecord(name="Healthcare", featured=False),
    CategoryRecord(name="Avatars", featured=False),
    CategoryRecord(name="Games", featured=False),
    CategoryRecord(name="Art", featured=False),
    CategoryRecord(name="Audio Editing", featured=False),
]
