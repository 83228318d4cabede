"""Sample records written to an empty backend on first launch."""

SAMPLE_PROJECTS = [
    {
        "id": "1",
        "title": "The Last Light",
        "logline": "A drifter running from his past is forced to stop when the road runs out.",
        "genre": "drama",
        "status": "pre-production",
        "format": "feature",
        "createdAt": "2025-02-01",
    },
]

SAMPLE_CREW = [
    {
        "id": "c-1",
        "name": "Dana Reyes",
        "role": "Director of Photography",
        "department": "camera",
        "phone": "555-0101",
        "email": "dana@example.com",
    },
    {
        "id": "c-2",
        "name": "Sam Okafor",
        "role": "Production Sound Mixer",
        "department": "sound",
        "phone": "555-0102",
        "email": "sam@example.com",
    },
]

SAMPLE_SHOTS = [
    {
        "id": "s-1",
        "projectId": "1",
        "sceneNumber": 1,
        "shotNumber": "1A",
        "type": "establishing",
        "movement": "static",
        "lens": "24mm",
        "description": "Empty highway at dawn, truck enters frame from the horizon",
        "notes": "",
        "status": "planned",
    },
    {
        "id": "s-2",
        "projectId": "1",
        "sceneNumber": 1,
        "shotNumber": "1B",
        "type": "medium",
        "movement": "tracking",
        "lens": "35mm",
        "description": "Marcus behind the wheel, eyes on the road",
        "notes": "Car mount, driver side",
        "status": "planned",
    },
    {
        "id": "s-3",
        "projectId": "1",
        "sceneNumber": 2,
        "shotNumber": "2A",
        "type": "wide",
        "movement": "static",
        "lens": "32mm",
        "description": "Diner exterior, truck pulls in",
        "notes": "",
        "status": "ready",
    },
]

SAMPLE_SCHEDULE = [
    {
        "id": "d-1",
        "projectId": "1",
        "date": "2025-03-15",
        "dayNumber": 1,
        "scenes": "1, 2",
        "location": "Route 66, mile marker 40",
        "callTime": "5:30 AM",
        "wrapTime": "6:00 PM",
        "notes": "Sunrise at 6:58 AM",
    },
    {
        "id": "d-2",
        "projectId": "1",
        "date": "2025-03-16",
        "dayNumber": 2,
        "scenes": "3, 4",
        "location": "Rosie's Diner",
        "callTime": "7:00 AM",
        "wrapTime": "7:00 PM",
        "notes": "",
    },
]

SAMPLE_BUDGET = [
    {
        "id": "b-1",
        "projectId": "1",
        "category": "equipment",
        "description": "Camera package rental",
        "estimated": 5000,
        "actual": 4800,
        "vendor": "Panavision",
        "paid": True,
        "notes": "3-week rental",
    },
    {
        "id": "b-2",
        "projectId": "1",
        "category": "locations",
        "description": "Diner location fee",
        "estimated": 2500,
        "actual": 0,
        "vendor": "Rosie's Diner",
        "paid": False,
        "notes": "",
    },
    {
        "id": "b-3",
        "projectId": "1",
        "category": "catering",
        "description": "Craft services, 12 days",
        "estimated": 3600,
        "actual": 1200,
        "vendor": "",
        "paid": False,
        "notes": "",
    },
]

SAMPLE_CONTINUITY = [
    {
        "id": "cn-1",
        "projectId": "1",
        "sceneNumber": 2,
        "shotNumber": "2A",
        "description": "Jacket zipped halfway",
        "details": "Left sleeve rolled, coffee cup in right hand",
        "timestamp": "2025-03-16T09:15:00Z",
    },
]

SAMPLE_LOOKBOOK = [
    {
        "id": "lb-1",
        "projectId": "1",
        "section": "tone",
        "title": "Quiet Devastation",
        "description": "The film lives in silences. Every conversation has more unsaid than said.",
        "sortOrder": 0,
        "createdAt": "2025-02-10T10:00:00Z",
    },
    {
        "id": "lb-2",
        "projectId": "1",
        "section": "color-palette",
        "title": "Desert Warm / Interior Cool",
        "description": "Exteriors in amber and dusty gold, interiors in steel blue and gray.",
        "colorHex": "#D4A76A",
        "sortOrder": 1,
        "createdAt": "2025-02-10T10:00:00Z",
    },
    {
        "id": "lb-3",
        "projectId": "1",
        "section": "reference-film",
        "title": "Paris, Texas (1984)",
        "description": "A man walking through the desert, running from himself.",
        "referenceFilm": "Paris, Texas",
        "sortOrder": 2,
        "createdAt": "2025-02-10T10:00:00Z",
    },
]

SAMPLE_DIRECTOR_STATEMENTS = [
    {
        "id": "ds-1",
        "projectId": "1",
        "text": "The Last Light is about the moment you realize you can't outrun yourself.",
        "updatedAt": "2025-02-12T10:00:00Z",
    },
]
