RECORDS = [
    {
        "id": "sunrise-ambient",
        "name": "Sunrise Ambient",
        "category": "ambient",
        "complexity": "basic",
        "tags": ["calm"],
        "labels": {"en": "Sunrise Ambient"},
        "artist": "Studio Library",
        "duration": "2:45",
        "size": "4.2 MB",
        "created_at": "2024-03-02T09:00:00",
    },
    {
        "id": "drive-electro",
        "name": "Drive",
        "category": "electronic",
        "complexity": "basic",
        "tags": ["energetic"],
        "labels": {"en": "Drive"},
        "artist": "Studio Library",
        "duration": "3:58",
        "size": "9.1 MB",
        "created_at": "2024-05-17T12:30:00",
    },
    {
        "id": "short-sting",
        "name": "Short Sting",
        "category": "fx",
        "complexity": "basic",
        "tags": ["transition"],
        "labels": {"en": "Short Sting"},
        "artist": "Studio Library",
        "duration": "0:07",
        "size": "180 KB",
        "created_at": "2023-11-20T18:00:00",
    },
    {
        "id": "orchestral-rise",
        "name": "Orchestral Rise",
        "category": "cinematic",
        "complexity": "basic",
        "tags": ["epic", "cinematic"],
        "labels": {"en": "Orchestral Rise"},
        "artist": "Studio Library",
        "duration": "1:02:10",
        "size": "120 MB",
        "created_at": "2022-01-08T08:15:00",
    },
]
