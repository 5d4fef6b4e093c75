"""
Job and task taxonomy.

Fifty professions and fifty tasks, written for long-tail SEO browsing pages
("best AI tools for graphic designers"). A job or task with a category is
matched to the tools of that category; one without is reached only through
the keyword maps in catalog.category_map.
"""
from schemas.catalog import JobRecord, TaskRecord

JOBS: list[JobRecord] = [
    JobRecord(name="Content Creator", slug="content-creator", category="video-generators", icon="🎬", featured=True,
        description="AI tools for multimedia production, viral content creation, video editing, and content optimization. Perfect for YouTubers, TikTokers, and digital creators."),
    JobRecord(name="Digital Marketer", slug="digital-marketer", category="marketing", icon="📈", featured=True,
        description="AI-powered marketing tools for campaigns, ads, analytics, and customer engagement. Essential for modern marketing professionals."),
    JobRecord(name="Software Developer", slug="software-developer", category="assistant-code", icon="💻", featured=True,
        description="AI coding assistants, code completion, debugging tools, and development accelerators for programmers and engineers."),
    JobRecord(name="Graphic Designer", slug="graphic-designer", category="image-generators", icon="🎨", featured=True,
        description="AI tools for creating visuals, logos, layouts, and stunning graphics. Essential for creative professionals."),
    JobRecord(name="Writer/Author", slug="writer-author", category="writing-web-seo", icon="✍️", featured=True,
        description="AI writing assistants for drafting, editing, brainstorming, and publishing. Perfect for novelists, bloggers, and content writers."),
    JobRecord(name="Educator/Teacher", slug="educator-teacher", category="memory", icon="📚", featured=True,
        description="AI tools for lesson planning, student engagement, grading automation, and personalized learning experiences."),
    JobRecord(name="Researcher", slug="researcher", category="ai-chat-assistant", icon="🔬", featured=True,
        description="AI-powered research tools for literature review, data synthesis, citation management, and academic writing."),
    JobRecord(name="Entrepreneur/Solopreneur", slug="entrepreneur-solopreneur", category="productivity", icon="🚀", featured=True,
        description="All-in-one AI tools for business planning, automation, productivity, and scaling your startup or side business."),
    JobRecord(name="Sales Professional", slug="sales-professional", category="e-commerce", icon="💼", featured=True,
        description="AI tools for lead generation, CRM automation, sales analytics, and closing more deals faster."),
    JobRecord(name="HR Specialist", slug="hr-specialist", category="human-resources", icon="👥", featured=True,
        description="AI recruitment tools, resume screening, employee engagement, and HR process automation."),
    JobRecord(name="Data Analyst", slug="data-analyst", category="llm-models", icon="📊", featured=True,
        description="AI visualization, data processing, insights generation, and analytics tools for data professionals."),
    JobRecord(name="Project Manager", slug="project-manager", category="project-management", icon="📋", featured=True,
        description="AI task tracking, team coordination, timeline optimization, and project automation tools."),
    JobRecord(name="Customer Support Agent", slug="customer-support-agent", category="ai-chat-assistant", icon="🎧", featured=False,
        description="AI chatbots, response automation, ticket management, and customer satisfaction tools."),
    JobRecord(name="Video Editor/Creator", slug="video-editor-creator", category="video-edition", icon="🎥", featured=True,
        description="AI video editing, effects, transitions, and post-production tools for video professionals."),
    JobRecord(name="Social Media Manager", slug="social-media-manager", category="advertising", icon="📱", featured=True,
        description="AI scheduling, content creation, analytics, and engagement tools for social media professionals."),
    JobRecord(name="SEO Specialist", slug="seo-specialist", category="seo", icon="🔍", featured=True,
        description="AI keyword research, content optimization, ranking analysis, and SEO automation tools."),
    JobRecord(name="Copywriter", slug="copywriter", category="e-mail", icon="📝", featured=True,
        description="AI copywriting tools for ads, marketing copy, landing pages, and persuasive content creation."),
    JobRecord(name="Podcaster", slug="podcaster", category="text-to-speech", icon="🎙️", featured=False,
        description="AI audio editing, transcription, voice enhancement, and podcast production tools."),
    JobRecord(name="E-commerce Owner", slug="ecommerce-owner", category="e-commerce", icon="🛒", featured=True,
        description="AI product listings, pricing optimization, ad creation, and e-commerce automation tools."),
    JobRecord(name="Freelancer", slug="freelancer", category="life-assistants", icon="🏠", featured=False,
        description="AI tools for proposals, invoicing, project management, and freelance business optimization."),
    JobRecord(name="Student/Learner", slug="student-learner", category="memory", icon="🎓", featured=True,
        description="AI study aids, flashcards, note-taking, tutoring, and learning optimization tools."),
    JobRecord(name="Healthcare Professional", slug="healthcare-professional", category="healthcare", icon="🏥", featured=False,
        description="AI diagnostics, patient management, medical research, and healthcare automation tools."),
    JobRecord(name="Lawyer/Legal Professional", slug="lawyer-legal", category=None, icon="⚖️", featured=False,
        description="AI legal research, document drafting, contract analysis, and case management tools."),
    JobRecord(name="Accountant/Finance Pro", slug="accountant-finance", category=None, icon="💰", featured=False,
        description="AI forecasting, expense tracking, financial analysis, and accounting automation tools."),
    JobRecord(name="Musician/Composer", slug="musician-composer", category="audio-editing", icon="🎵", featured=False,
        description="AI music generation, composition, mixing, mastering, and audio production tools."),
    JobRecord(name="Photographer", slug="photographer", category="image-editing", icon="📷", featured=False,
        description="AI photo enhancement, editing, organization, and photography workflow tools."),
    JobRecord(name="Blogger/Influencer", slug="blogger-influencer", category="writing-web-seo", icon="💡", featured=True,
        description="AI content ideation, SEO optimization, engagement analysis, and blogging tools."),
    JobRecord(name="UX/UI Designer", slug="ux-ui-designer", category="design", icon="🖌️", featured=True,
        description="AI prototyping, wireframing, user testing, and interface design tools."),
    JobRecord(name="Data Scientist", slug="data-scientist", category="llm-models", icon="🧠", featured=True,
        description="AI modeling, machine learning, data processing, and predictive analytics tools."),
    JobRecord(name="Consultant", slug="consultant", category=None, icon="📑", featured=False,
        description="AI report generation, insights synthesis, presentation creation, and consulting tools."),
    JobRecord(name="Journalist", slug="journalist", category="ai-detection", icon="📰", featured=False,
        description="AI research, fact-checking, article drafting, and news production tools."),
    JobRecord(name="Product Manager", slug="product-manager", category="project-management", icon="🎯", featured=True,
        description="AI roadmapping, feature prioritization, user feedback analysis, and product tools."),
    JobRecord(name="Real Estate Agent", slug="real-estate-agent", category=None, icon="🏡", featured=False,
        description="AI property listings, virtual tours, market analysis, and real estate automation tools."),
    JobRecord(name="Fitness Trainer", slug="fitness-trainer", category=None, icon="💪", featured=False,
        description="AI workout planning, nutrition tracking, client management, and fitness tools."),
    JobRecord(name="Event Planner", slug="event-planner", category=None, icon="🎉", featured=False,
        description="AI scheduling, invitation management, venue suggestions, and event coordination tools."),
    JobRecord(name="Translator", slug="translator", category=None, icon="🌐", featured=False,
        description="AI multilingual translation, localization, and language processing tools."),
    JobRecord(name="Architect", slug="architect", category=None, icon="🏗️", featured=False,
        description="AI design simulation, 3D modeling, blueprint generation, and architecture tools."),
    JobRecord(name="Chef/Culinary Professional", slug="chef-culinary", category=None, icon="👨‍🍳", featured=False,
        description="AI recipe generation, menu planning, ingredient optimization, and culinary tools."),
    JobRecord(name="Therapist/Counselor", slug="therapist-counselor", category="healthcare", icon="🧘", featured=False,
        description="AI mental health support, session notes, patient tracking, and therapy tools."),
    JobRecord(name="Nonprofit Manager", slug="nonprofit-manager", category=None, icon="❤️", featured=False,
        description="AI fundraising, grant writing, donor management, and nonprofit tools."),
    JobRecord(name="Supply Chain Manager", slug="supply-chain-manager", category=None, icon="📦", featured=False,
        description="AI forecasting, inventory management, logistics optimization, and supply chain tools."),
    JobRecord(name="Manufacturing Engineer", slug="manufacturing-engineer", category=None, icon="⚙️", featured=False,
        description="AI quality control, process optimization, defect detection, and manufacturing tools."),
    JobRecord(name="Cybersecurity Analyst", slug="cybersecurity-analyst", category=None, icon="🔐", featured=True,
        description="AI threat detection, vulnerability scanning, security automation, and cybersecurity tools."),
    JobRecord(name="Environmental Scientist", slug="environmental-scientist", category=None, icon="🌍", featured=False,
        description="AI climate modeling, data analysis, environmental monitoring, and sustainability tools."),
    JobRecord(name="Librarian/Information Specialist", slug="librarian-info-specialist", category=None, icon="📖", featured=False,
        description="AI research curation, cataloging, information retrieval, and library tools."),
    JobRecord(name="Travel Agent", slug="travel-agent", category=None, icon="✈️", featured=False,
        description="AI itinerary planning, booking optimization, travel recommendations, and tourism tools."),
    JobRecord(name="Fashion Designer", slug="fashion-designer", category=None, icon="👗", featured=False,
        description="AI trend prediction, design generation, fabric selection, and fashion tools."),
    JobRecord(name="Game Developer", slug="game-developer", category="games", icon="🎮", featured=True,
        description="AI asset creation, level design, NPC behavior, and game development tools."),
    JobRecord(name="Public Relations Specialist", slug="public-relations", category=None, icon="📣", featured=False,
        description="AI media monitoring, press release writing, reputation management, and PR tools."),
    JobRecord(name="Administrative Assistant", slug="administrative-assistant", category="productivity", icon="📅", featured=False,
        description="AI scheduling, email management, document organization, and administrative tools."),
]

TASKS: list[TaskRecord] = [
    TaskRecord(name="Image Generation", slug="image-generation", category="image-generators", icon="🖼️", featured=True,
        description="AI text-to-image creation tools for generating stunning visuals, art, and graphics from text descriptions."),
    TaskRecord(name="Text Generation", slug="text-generation", category="ai-chat-assistant", icon="📄", featured=True,
        description="AI writing tools for generating articles, copy, stories, and any text content automatically."),
    TaskRecord(name="Video Generation", slug="video-generation", category="video-generators", icon="🎬", featured=True,
        description="AI text-to-video tools for creating video content from prompts and scripts."),
    TaskRecord(name="Image Editing", slug="image-editing", category="image-editing", icon="✨", featured=True,
        description="AI photo retouching, enhancement, background removal, and advanced image manipulation tools."),
    TaskRecord(name="Code Writing", slug="code-writing", category="assistant-code", icon="💻", featured=True,
        description="AI programming assistants for writing, completing, and generating code in any language."),
    TaskRecord(name="Text Summarization", slug="text-summarization", category="memory", icon="📋", featured=True,
        description="AI tools for condensing long documents, articles, and content into concise summaries."),
    TaskRecord(name="SEO Optimization", slug="seo-optimization", category="seo", icon="🔍", featured=True,
        description="AI keyword research, content optimization, and search ranking improvement tools."),
    TaskRecord(name="Content Writing", slug="content-writing", category="writing-web-seo", icon="✍️", featured=True,
        description="AI blog writing, marketing content, and professional copywriting tools."),
    TaskRecord(name="Graphic Design", slug="graphic-design", category="design", icon="🎨", featured=True,
        description="AI layout creation, visual design, and graphic production tools."),
    TaskRecord(name="Language Translation", slug="language-translation", category=None, icon="🌐", featured=True,
        description="AI multilingual translation tools for accurate and natural language conversion."),
    TaskRecord(name="Data Analysis", slug="data-analysis", category=None, icon="📊", featured=True,
        description="AI insights generation, data visualization, and analytical processing tools."),
    TaskRecord(name="Email Marketing", slug="email-marketing", category="e-mail", icon="📧", featured=True,
        description="AI email campaign creation, automation, and optimization tools."),
    TaskRecord(name="Social Media Management", slug="social-media-management", category="marketing", icon="📱", featured=True,
        description="AI posting, scheduling, analytics, and engagement tools for social platforms."),
    TaskRecord(name="Website Building", slug="website-building", category="websites-design", icon="🌐", featured=True,
        description="AI no-code website creation, design, and development tools."),
    TaskRecord(name="Logo Design", slug="logo-design", category="logo-creation", icon="🏷️", featured=True,
        description="AI brand identity and logo creation tools for businesses and startups."),
    TaskRecord(name="Resume Building", slug="resume-building", category="human-resources", icon="📄", featured=True,
        description="AI CV optimization, formatting, and professional resume creation tools."),
    TaskRecord(name="Presentation Creation", slug="presentation-creation", category=None, icon="📊", featured=True,
        description="AI slide design, deck generation, and presentation tools."),
    TaskRecord(name="Note Taking", slug="note-taking", category="productivity", icon="📝", featured=False,
        description="AI organization, summarization, and intelligent note management tools."),
    TaskRecord(name="Task Automation", slug="task-automation", category="project-management", icon="⚡", featured=True,
        description="AI workflow automation, process optimization, and repetitive task tools."),
    TaskRecord(name="Voice Synthesis", slug="voice-synthesis", category="text-to-speech", icon="🔊", featured=True,
        description="AI text-to-speech, voice cloning, and audio generation tools."),
    TaskRecord(name="Music Composition", slug="music-composition", category="audio-editing", icon="🎵", featured=True,
        description="AI music generation, scoring, and audio composition tools."),
    TaskRecord(name="Video Editing", slug="video-editing", category="video-edition", icon="🎥", featured=True,
        description="AI video cuts, effects, transitions, and post-production tools."),
    TaskRecord(name="Plagiarism Detection", slug="plagiarism-detection", category="ai-detection", icon="🔎", featured=False,
        description="AI originality checking, content verification, and academic integrity tools."),
    TaskRecord(name="Grammar Checking", slug="grammar-checking", category=None, icon="✓", featured=True,
        description="AI proofreading, spelling correction, and writing improvement tools."),
    TaskRecord(name="Sentiment Analysis", slug="sentiment-analysis", category=None, icon="😊", featured=False,
        description="AI emotion detection, opinion mining, and text sentiment tools."),
    TaskRecord(name="Predictive Modeling", slug="predictive-modeling", category="llm-models", icon="📈", featured=False,
        description="AI forecasting, trend prediction, and machine learning modeling tools."),
    TaskRecord(name="Face Swapping", slug="face-swapping", category="face-swap", icon="🎭", featured=False,
        description="AI face replacement, deepfake creation, and facial manipulation tools."),
    TaskRecord(name="Background Removal", slug="background-removal", category=None, icon="✂️", featured=True,
        description="AI photo cleanup, background deletion, and image isolation tools."),
    TaskRecord(name="Chatbot Development", slug="chatbot-development", category=None, icon="🤖", featured=True,
        description="AI conversational bot creation, dialog design, and chat automation tools."),
    TaskRecord(name="Research Synthesis", slug="research-synthesis", category=None, icon="🔬", featured=False,
        description="AI literature review, academic research, and source aggregation tools."),
    TaskRecord(name="Scheduling", slug="scheduling", category="life-assistants", icon="📅", featured=False,
        description="AI calendar management, appointment booking, and time optimization tools."),
    TaskRecord(name="Invoice Processing", slug="invoice-processing", category=None, icon="💳", featured=False,
        description="AI billing automation, expense tracking, and financial document tools."),
    TaskRecord(name="Customer Support Automation", slug="customer-support-automation", category=None, icon="🎧", featured=True,
        description="AI helpdesk, ticket management, and customer query resolution tools."),
    TaskRecord(name="Lead Generation", slug="lead-generation", category="advertising", icon="🎯", featured=True,
        description="AI sales prospecting, contact discovery, and lead qualification tools."),
    TaskRecord(name="Trend Forecasting", slug="trend-forecasting", category=None, icon="📉", featured=False,
        description="AI market insights, trend prediction, and future analysis tools."),
    TaskRecord(name="Personalized Recommendations", slug="personalized-recommendations", category="e-commerce", icon="💡", featured=False,
        description="AI product suggestions, content curation, and recommendation engine tools."),
    TaskRecord(name="Defect Detection", slug="defect-detection", category=None, icon="🔧", featured=False,
        description="AI quality control, visual inspection, and manufacturing error tools."),
    TaskRecord(name="Speech Transcription", slug="speech-transcription", category=None, icon="🎤", featured=True,
        description="AI audio-to-text, meeting transcription, and voice recognition tools."),
    TaskRecord(name="Subtitle Generation", slug="subtitle-generation", category="video", icon="💬", featured=False,
        description="AI video captioning, accessibility, and subtitle creation tools."),
    TaskRecord(name="Code Debugging", slug="code-debugging", category=None, icon="🐛", featured=True,
        description="AI error detection, bug fixing, and code quality improvement tools."),
    TaskRecord(name="Brainstorming Ideas", slug="brainstorming-ideas", category="storytelling-generator", icon="💭", featured=True,
        description="AI creativity enhancement, ideation, and concept generation tools."),
    TaskRecord(name="Document Summarization", slug="document-summarization", category=None, icon="📑", featured=False,
        description="AI long-form content condensation and key point extraction tools."),
    TaskRecord(name="Virtual Try-On", slug="virtual-try-on", category=None, icon="👔", featured=False,
        description="AI fashion fitting, product visualization, and e-commerce preview tools."),
    TaskRecord(name="Recipe Generation", slug="recipe-generation", category=None, icon="🍳", featured=False,
        description="AI culinary ideas, meal planning, and cooking suggestion tools."),
    TaskRecord(name="Workout Planning", slug="workout-planning", category=None, icon="💪", featured=False,
        description="AI fitness routines, exercise programs, and health optimization tools."),
    TaskRecord(name="Travel Itinerary", slug="travel-itinerary", category=None, icon="✈️", featured=False,
        description="AI trip planning, destination recommendations, and travel organization tools."),
    TaskRecord(name="Financial Forecasting", slug="financial-forecasting", category=None, icon="💰", featured=False,
        description="AI budgeting, investment analysis, and financial planning tools."),
    TaskRecord(name="Threat Detection", slug="threat-detection", category=None, icon="🛡️", featured=False,
        description="AI cybersecurity monitoring, vulnerability scanning, and security tools."),
    TaskRecord(name="Protein Structure Prediction", slug="protein-structure-prediction", category=None, icon="🧬", featured=False,
        description="AI biotech, molecular modeling, and scientific research tools."),
    TaskRecord(name="Emotional Support", slug="emotional-support", category="healthcare", icon="❤️", featured=False,
        description="AI mental health, therapy-like conversations, and wellbeing tools."),
]
