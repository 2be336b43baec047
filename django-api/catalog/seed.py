"""Sample catalog loaded by the in-memory store and ``seed_catalog``.

Foreign keys refer to 1-based positions in the lists above them, which match
the ids assigned when the lists are loaded into an empty store.
"""

from datetime import datetime, timezone
from decimal import Decimal


def _at(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&{}&q=80"

CATEGORIES = [
    {"name": "Concerts", "icon": "music", "icon_bg_color": "bg-blue-50"},
    {"name": "Sports", "icon": "basketball-ball", "icon_bg_color": "bg-orange-50"},
    {"name": "Theater", "icon": "theater-masks", "icon_bg_color": "bg-purple-50"},
    {"name": "Festivals", "icon": "umbrella-beach", "icon_bg_color": "bg-green-50"},
]

CITIES = [
    {"name": "New York"},
    {"name": "Los Angeles"},
    {"name": "Chicago"},
    {"name": "Miami"},
    {"name": "Dallas"},
    {"name": "Seattle"},
]

EVENTS = [
    {
        "title": "The Soundwaves Tour 2023",
        "description": (
            "Experience the magical Soundwaves Tour with incredible artists and "
            "amazing music. This concert brings together some of the best "
            "musicians for an unforgettable night."
        ),
        "image_url": _IMAGE.format("photo-1501281668745-f7f57925c3b4", "w=600&h=400"),
        "venue": "Madison Square Garden",
        "address": "4 Pennsylvania Plaza, New York, NY 10001",
        "city_id": 1,
        "category_id": 1,
        "start_date": _at("2023-10-15T20:00:00"),
        "end_date": _at("2023-10-15T23:00:00"),
        "is_featured": True,
        "is_trending": False,
        "age_restriction": "All ages welcome",
        "entry_policy": "Gates open at 6:00 PM. All attendees must have a valid ticket for entry.",
    },
    {
        "title": "Electric Dreams Festival",
        "description": (
            "The ultimate electronic music festival featuring world-famous DJs and "
            "incredible light shows. Dance the night away with electrifying beats "
            "and amazing visuals."
        ),
        "image_url": _IMAGE.format("photo-1514525253161-7a46d19cd819", "w=600&h=400"),
        "venue": "Staples Center",
        "address": "1111 S Figueroa St, Los Angeles, CA 90015",
        "city_id": 2,
        "category_id": 1,
        "start_date": _at("2023-09-22T21:00:00"),
        "end_date": _at("2023-09-23T02:00:00"),
        "is_featured": True,
        "is_trending": False,
        "age_restriction": "18+",
        "entry_policy": "Gates open at 7:00 PM. ID check required at entrance.",
    },
    {
        "title": "Hamilton: The Musical",
        "description": (
            "The iconic musical about Alexander Hamilton's extraordinary life story. "
            "Experience this revolutionary musical that has changed Broadway forever "
            "with its unique blend of hip-hop, jazz, R&B, and Broadway."
        ),
        "image_url": _IMAGE.format("photo-1507676184212-d03ab07a01bf", "w=600&h=400"),
        "venue": "Richard Rodgers Theatre",
        "address": "226 W 46th St, New York, NY 10036",
        "city_id": 1,
        "category_id": 3,
        "start_date": _at("2023-11-08T19:30:00"),
        "end_date": _at("2023-11-08T22:30:00"),
        "is_featured": True,
        "is_trending": False,
        "age_restriction": "Recommended for ages 10+",
        "entry_policy": (
            "Doors open 1 hour before performance. Latecomers will be seated at "
            "an appropriate break."
        ),
    },
    {
        "title": "Lakers vs. Bulls",
        "description": (
            "Witness this exciting basketball matchup between two legendary NBA "
            "teams. The Lakers face off against the Bulls in what promises to be "
            "an action-packed game with thrilling moments."
        ),
        "image_url": _IMAGE.format("photo-1504450758481-7338eba7524a", "w=600&h=400"),
        "venue": "United Center",
        "address": "1901 W Madison St, Chicago, IL 60612",
        "city_id": 3,
        "category_id": 2,
        "start_date": _at("2023-10-19T19:00:00"),
        "end_date": _at("2023-10-19T22:00:00"),
        "is_featured": True,
        "is_trending": False,
        "age_restriction": "All ages welcome",
        "entry_policy": (
            "Gates open 2 hours before game time. Enhanced security screening in effect."
        ),
    },
    {
        "title": "Jazz Night: The Quartet",
        "description": (
            "Experience an intimate evening of jazz with The Quartet, featuring some "
            "of the finest jazz musicians on the scene today. Enjoy smooth melodies "
            "and improvised solos in a cozy atmosphere."
        ),
        "image_url": _IMAGE.format("photo-1511192336575-5a79af67a629", "w=600&h=400"),
        "venue": "Blue Note",
        "address": "131 W 3rd St, New York, NY 10012",
        "city_id": 1,
        "category_id": 1,
        "start_date": _at("2023-08-15T20:00:00"),
        "end_date": _at("2023-08-15T23:00:00"),
        "is_featured": False,
        "is_trending": True,
        "age_restriction": "21+",
        "entry_policy": "Seating begins at 6:30 PM. Two drink minimum per person.",
    },
    {
        "title": "Philharmonic Orchestra",
        "description": (
            "The world-renowned Philharmonic Orchestra presents an evening of "
            "classical masterpieces. Conducted by Maestro James Reynolds, the "
            "program includes works by Mozart, Beethoven, and Tchaikovsky."
        ),
        "image_url": _IMAGE.format("photo-1465847899084-d164df4dedc6", "w=600&h=400"),
        "venue": "Symphony Hall",
        "address": "301 Massachusetts Ave, Boston, MA 02115",
        "city_id": 3,
        "category_id": 1,
        "start_date": _at("2023-09-10T19:00:00"),
        "end_date": _at("2023-09-10T21:30:00"),
        "is_featured": False,
        "is_trending": True,
        "age_restriction": "All ages welcome",
        "entry_policy": "Doors open at 6:30 PM. No late seating during performances.",
    },
    {
        "title": "Comedy Night: Dave Phillips",
        "description": (
            "Laugh until your sides hurt with comedian Dave Phillips, known for his "
            "quick wit and hilarious observations. Join us for a night of top-tier "
            "comedy entertainment."
        ),
        "image_url": _IMAGE.format("photo-1527224538127-2104bb71c51b", "w=600&h=400"),
        "venue": "The Comedy Store",
        "address": "8433 Sunset Blvd, Los Angeles, CA 90069",
        "city_id": 2,
        "category_id": 3,
        "start_date": _at("2023-07-28T21:00:00"),
        "end_date": _at("2023-07-28T23:00:00"),
        "is_featured": False,
        "is_trending": True,
        "age_restriction": "18+",
        "entry_policy": "Doors open at 7:00 PM. Two item minimum purchase required.",
    },
    {
        "title": "NFL: Eagles vs. Cowboys",
        "description": (
            "The rivalry continues as the Philadelphia Eagles face off against the "
            "Dallas Cowboys in this exciting NFL game. Feel the energy as two "
            "legendary teams compete for victory."
        ),
        "image_url": _IMAGE.format("photo-1596727147705-61a532a659bd", "w=400&h=300"),
        "venue": "Lincoln Financial Field",
        "address": "1 Lincoln Financial Field Way, Philadelphia, PA 19148",
        "city_id": 1,
        "category_id": 2,
        "start_date": _at("2023-10-22T13:00:00"),
        "end_date": _at("2023-10-22T16:00:00"),
        "is_featured": False,
        "is_trending": False,
        "age_restriction": "All ages welcome",
        "entry_policy": "Gates open 2 hours before kickoff. Clear bag policy in effect.",
    },
    {
        "title": "Summer Sound Festival 2023",
        "description": (
            "The ultimate summer music festival with multiple stages and dozens of "
            "performers across all genres. Three days of non-stop music, food, art, "
            "and amazing experiences."
        ),
        "image_url": _IMAGE.format("photo-1429962714451-bb934ecdc4ec", "w=400&h=300"),
        "venue": "Randall's Island Park",
        "address": "Randall's Island, New York, NY 10035",
        "city_id": 1,
        "category_id": 4,
        "start_date": _at("2023-08-18T10:00:00"),
        "end_date": _at("2023-08-20T23:00:00"),
        "is_featured": False,
        "is_trending": False,
        "age_restriction": "All ages. Children under 10 free with paying adult.",
        "entry_policy": "Gates open at 10:00 AM daily. Re-entry allowed with valid wristband.",
    },
    {
        "title": "The Phantom of the Opera",
        "description": (
            "The longest-running show in Broadway history, this unforgettable "
            "musical combines spectacular scenery with haunting music. Experience "
            "the magic of Andrew Lloyd Webber's masterpiece."
        ),
        "image_url": _IMAGE.format("photo-1503095396549-807759245b35", "w=400&h=300"),
        "venue": "Majestic Theatre",
        "address": "245 W 44th St, New York, NY 10036",
        "city_id": 1,
        "category_id": 3,
        "start_date": _at("2023-11-15T19:30:00"),
        "end_date": _at("2023-11-15T22:30:00"),
        "is_featured": False,
        "is_trending": False,
        "age_restriction": "Recommended for ages 8+",
        "entry_policy": (
            "Doors open 45 minutes before performance. No late seating until intermission."
        ),
    },
    {
        "title": "Coldplay: Music of the Spheres World Tour",
        "description": (
            "Coldplay brings their spectacular Music of the Spheres World Tour to "
            "the Rose Bowl! Experience an unforgettable night of music, lights, and "
            "special effects as the band performs their greatest hits along with "
            "new music from their latest album."
        ),
        "image_url": _IMAGE.format("photo-1540039155733-5bb30b53aa14", "w=1200&h=400"),
        "venue": "Rose Bowl Stadium",
        "address": "1001 Rose Bowl Dr, Pasadena, CA 91103",
        "city_id": 2,
        "category_id": 1,
        "start_date": _at("2023-11-12T20:00:00"),
        "end_date": _at("2023-11-12T23:30:00"),
        "is_featured": True,
        "is_trending": True,
        "age_restriction": (
            "All ages welcome. Children under 2 years do not require a ticket."
        ),
        "entry_policy": "Gates open at 6:00 PM. All attendees must have a valid ticket for entry.",
    },
]

TICKET_TYPES = [
    {
        "event_id": 11,
        "name": "General Admission",
        "description": "Standing room only, first come first served",
        "price": Decimal("99.00"),
        "available_quantity": 1000,
        "max_per_order": 8,
    },
    {
        "event_id": 11,
        "name": "Premium Seats",
        "description": "Reserved seating, Best views, Exclusive entrance",
        "price": Decimal("179.00"),
        "available_quantity": 500,
        "max_per_order": 6,
    },
    {
        "event_id": 11,
        "name": "VIP Package",
        "description": "Front row, Meet & greet, Exclusive merchandise",
        "price": Decimal("349.00"),
        "available_quantity": 100,
        "max_per_order": 4,
    },
    {
        "event_id": 1,
        "name": "Standard",
        "description": "Regular seating with good views",
        "price": Decimal("59.00"),
        "available_quantity": 500,
        "max_per_order": 6,
    },
    {
        "event_id": 1,
        "name": "Premium",
        "description": "Better seating with excellent views",
        "price": Decimal("89.00"),
        "available_quantity": 300,
        "max_per_order": 4,
    },
    {
        "event_id": 2,
        "name": "General Entry",
        "description": "Basic festival entry",
        "price": Decimal("75.00"),
        "available_quantity": 2000,
        "max_per_order": 8,
    },
    {
        "event_id": 2,
        "name": "VIP Entry",
        "description": "VIP area access, express entry, premium viewing areas",
        "price": Decimal("150.00"),
        "available_quantity": 500,
        "max_per_order": 4,
    },
    {
        "event_id": 3,
        "name": "Balcony",
        "description": "Upper level seating",
        "price": Decimal("120.00"),
        "available_quantity": 200,
        "max_per_order": 6,
    },
    {
        "event_id": 3,
        "name": "Orchestra",
        "description": "Main floor seating",
        "price": Decimal("220.00"),
        "available_quantity": 300,
        "max_per_order": 4,
    },
    {
        "event_id": 4,
        "name": "Upper Level",
        "description": "Upper section seating",
        "price": Decimal("85.00"),
        "available_quantity": 800,
        "max_per_order": 8,
    },
    {
        "event_id": 4,
        "name": "Lower Level",
        "description": "Lower section seating with better views",
        "price": Decimal("150.00"),
        "available_quantity": 400,
        "max_per_order": 6,
    },
    {
        "event_id": 4,
        "name": "Courtside",
        "description": "Premium courtside seating",
        "price": Decimal("450.00"),
        "available_quantity": 50,
        "max_per_order": 2,
    },
]
