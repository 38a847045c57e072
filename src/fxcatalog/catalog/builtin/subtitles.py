RECORDS = [
    {
        "id": "basic-white",
        "name": "Basic White",
        "category": "basic",
        "complexity": "basic",
        "tags": ["minimal", "popular"],
        "labels": {"en": "Basic White", "ru": "Простой белый"},
        "style": {"color": "#ffffff", "fontSize": 24, "textShadow": "1px 1px 2px #000"},
    },
    {
        "id": "cinematic-yellow",
        "name": "Cinematic Yellow",
        "category": "cinematic",
        "complexity": "intermediate",
        "tags": ["cinematic"],
        "labels": {"en": "Cinematic Yellow", "ru": "Кинематографический жёлтый"},
        "style": {"color": "#ffd400", "fontSize": 28, "fontFamily": "serif"},
    },
    {
        "id": "neon-glow",
        "name": "Neon Glow",
        "category": "creative",
        "complexity": "advanced",
        "tags": ["modern", "bright"],
        "labels": {"en": "Neon Glow", "ru": "Неоновое свечение"},
        "style": {"color": "#00ffe1", "fontSize": 30, "textShadow": "0 0 8px #00ffe1"},
    },
    {
        "id": "boxed-dark",
        "name": "Boxed Dark",
        "category": "basic",
        "complexity": "basic",
        "tags": ["readable"],
        "labels": {"en": "Boxed Dark", "ru": "Тёмная плашка"},
        "style": {"color": "#ffffff", "backgroundColor": "rgba(0,0,0,0.7)", "fontSize": 22},
    },
]
