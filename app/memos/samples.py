# Example memos inserted once into an empty store (no id/timestamps: store-assigned)
SAMPLE_MEMOS: list[dict] = [
    {
        "title": "Prepare for the project meeting",
        "content": (
            "Things to prepare for next Monday's 10am project kickoff:\n\n"
            "- Write the project scope document\n"
            "- Split roles across the team\n"
            "- Draft the schedule\n"
            "- List the resources we need"
        ),
        "category": "work",
        "tags": ["meeting", "project", "prep"],
    },
    {
        "title": "Learn what's new in React 18",
        "content": (
            "Features added in React 18 to study:\n\n"
            "1. Concurrent features\n"
            "2. Automatic batching\n"
            "3. Suspense improvements\n"
            "4. useId hook\n"
            "5. useDeferredValue hook\n\n"
            "Read the official docs this weekend and build a small example."
        ),
        "category": "study",
        "tags": ["React", "learning", "dev"],
    },
    {
        "title": "App idea: habit tracker",
        "content": (
            "An app for managing habits you want to keep every day:\n\n"
            "Core features:\n"
            "- Register and manage habits\n"
            "- Daily check-in\n"
            "- Progress charts\n"
            "- Goal reminders\n"
            "- Statistics\n\n"
            "Stack: React Native + a hosted Postgres\n"
            "Target launch: in three months"
        ),
        "category": "idea",
        "tags": ["app", "habits", "React Native"],
    },
    {
        "title": "Weekend trip plan",
        "content": (
            "Plan for this weekend's trip to Jeju:\n\n"
            "Saturday:\n"
            "- Morning: hike Hallasan\n"
            "- Afternoon: Seongsan Ilchulbong\n"
            "- Evening: black pork dinner\n\n"
            "Sunday:\n"
            "- Morning: Udo island\n"
            "- Afternoon: shopping and souvenirs\n"
            "- Evening: head to the airport\n\n"
            "Pack: hiking boots, camera, sunscreen"
        ),
        "category": "personal",
        "tags": ["travel", "Jeju", "weekend"],
    },
    {
        "title": "Reading list",
        "content": (
            "Books to read this year:\n\n"
            "Software:\n"
            "- Clean Code (Robert C. Martin)\n"
            "- Refactoring, 2nd ed. (Martin Fowler)\n"
            "- System Design Interview (Alex Xu)\n\n"
            "Self-improvement:\n"
            "- Atomic Habits (James Clear)\n"
            "- How to Win Friends and Influence People (Dale Carnegie)\n\n"
            "Fiction:\n"
            "- Kim Jiyoung, Born 1982 (Cho Nam-joo)\n"
            "- The Midnight Library (Matt Haig)"
        ),
        "category": "personal",
        "tags": ["reading", "books", "self-improvement"],
    },
    {
        "title": "Performance tuning ideas",
        "content": (
            "Ways to speed up the web app:\n\n"
            "Frontend:\n"
            "- Image optimization (WebP, lazy loading)\n"
            "- Code splitting\n"
            "- Smaller bundles\n"
            "- Caching strategy\n\n"
            "Backend:\n"
            "- Query tuning\n"
            "- CDN\n"
            "- Server-side rendering\n"
            "- API response caching\n\n"
            "Monitoring:\n"
            "- Measure Core Web Vitals\n"
            "- Set a performance budget"
        ),
        "category": "idea",
        "tags": ["performance", "optimization", "web"],
    },
]
