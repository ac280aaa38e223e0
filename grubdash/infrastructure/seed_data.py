"""Demo Orders: sample collection loaded at startup when seed_demo_orders is set.

Invariants:
    - demo_orders() returns fresh Order objects on every call (no shared mutable state)
    - Covers every status, so delete can be exercised both ways
"""

from grubdash.core.order import Order


_DEMO_ORDERS: tuple[dict, ...] = (
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": "out-for-delivery",
        "dishes": [
            {
                "id": "90c3d873684bf381dfab29034b5bba73",
                "name": "Falafel and tahini bagel",
                "description": "A warm bagel filled with falafel and tahini",
                "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg",
                "price": 6,
                "quantity": 1,
            },
        ],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "delivered",
        "dishes": [
            {
                "id": "d351db2b49b69679504652ea1cf38241",
                "name": "Dolcelatte and chickpea spaghetti",
                "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
                "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg",
                "price": 19,
                "quantity": 2,
            },
        ],
    },
    {
        "id": "3a1f0c2e9b7d4e6fa8c5b2d1e0f9a7b6",
        "deliverTo": "221B Baker Street, London",
        "mobileNumber": "(020) 7224-3688",
        "status": "pending",
        "dishes": [
            {
                "id": "3c637d011d844ebab1205fef8a7e36ea",
                "name": "Broccoli and beetroot stir fry",
                "price": 15,
                "quantity": 3,
            },
        ],
    },
    {
        "id": "b8e2c4a6d0f14e3c9a7b5d2f1e0c8a64",
        "deliverTo": "742 Evergreen Terrace, Springfield",
        "mobileNumber": "(939) 555-0113",
        "status": "preparing",
        "dishes": [
            {
                "id": "90c3d873684bf381dfab29034b5bba73",
                "name": "Falafel and tahini bagel",
                "price": 6,
                "quantity": 4,
            },
        ],
    },
)


def demo_orders() -> list[Order]:
    return [Order.from_dict(data) for data in _DEMO_ORDERS]
