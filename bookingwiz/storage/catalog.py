"""Experience catalog seeded into every new store."""

from decimal import Decimal

from bookingwiz.models import Experience

DEFAULT_EXPERIENCES = [
    {
        "id": "meditation-retreats",
        "name": "Meditation Retreats",
        "description": "Join guided meditation sessions with Buddhist monks in serene monastery settings.",
        "price": Decimal("120.00"),
        "duration": "3-7 days",
        "image": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300",
        "type": "meditation-retreats",
    },
    {
        "id": "monastery-treks",
        "name": "Monastery Treks",
        "description": "Embark on scenic treks to remote monasteries through pristine Himalayan landscapes.",
        "price": Decimal("200.00"),
        "duration": "5-10 days",
        "image": "https://images.unsplash.com/photo-1544735716-392fe2489ffa?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300",
        "type": "monastery-treks",
    },
    {
        "id": "cultural-workshops",
        "name": "Cultural Workshops",
        "description": "Learn traditional Buddhist arts, crafts, and philosophy from local masters.",
        "price": Decimal("80.00"),
        "duration": "2-5 days",
        "image": "https://images.unsplash.com/photo-1578662996442-48f60103fc96?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300",
        "type": "cultural-workshops",
    },
    {
        "id": "sunrise-tours",
        "name": "Sunrise Tours",
        "description": "Witness breathtaking sunrises over the Himalayas from monastery viewpoints.",
        "price": Decimal("60.00"),
        "duration": "1-2 days",
        "image": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300",
        "type": "sunrise-tours",
    },
]


def default_experiences() -> list[Experience]:
    return [Experience(**entry) for entry in DEFAULT_EXPERIENCES]
