# app/seed_data.py
"""
Canonical demonstration data set used by the seeder.
"""

from datetime import date

from app.models.customers import CustomerSeed
from app.models.invoices import InvoiceSeed

DEFAULT_IMAGE_URL = "/customers/default.png"

CUSTOMER_SEEDS = [
    CustomerSeed(name="Evil Rabbit", email="evil@example.com", image_url="/customers/evil-rabbit.png"),
    CustomerSeed(name="Acme Corp", email="acme@example.com", image_url="/customers/acme.png"),
    CustomerSeed(name="Globex", email="globex@example.com", image_url="/customers/globex.png"),
    CustomerSeed(name="Soylent", email="soylent@example.com", image_url="/customers/soylent.png"),
    CustomerSeed(name="Blue Bottle", email="bluebottle@example.com", image_url="/customers/blue-bottle.png"),
    CustomerSeed(name="Orange Inc", email="orange@example.com", image_url="/customers/orange-inc.png"),
    CustomerSeed(name="Lime Green", email="lime@example.com", image_url="/customers/lime-green.png"),
    CustomerSeed(name="Pink Panther", email="pink@example.com", image_url="/customers/pink-panther.png"),
    CustomerSeed(name="Red Rocket", email="red@example.com", image_url="/customers/red-rocket.png"),
    CustomerSeed(name="Yellow Bird", email="yellow@example.com", image_url="/customers/yellow-bird.png"),
]

INVOICE_SEEDS = [
    InvoiceSeed(customer_name="Evil Rabbit", amount=666, status="paid", date=date(2025, 1, 15)),
    InvoiceSeed(customer_name="Evil Rabbit", amount=320, status="pending", date=date(2025, 2, 10)),
    InvoiceSeed(customer_name="Evil Rabbit", amount=980, status="paid", date=date(2025, 3, 5)),
    InvoiceSeed(customer_name="Acme Corp", amount=1200, status="pending", date=date(2025, 1, 20)),
    InvoiceSeed(customer_name="Acme Corp", amount=300, status="paid", date=date(2025, 2, 18)),
    InvoiceSeed(customer_name="Acme Corp", amount=450, status="paid", date=date(2025, 3, 28)),
    InvoiceSeed(customer_name="Globex", amount=800, status="paid", date=date(2025, 1, 10)),
    InvoiceSeed(customer_name="Globex", amount=500, status="pending", date=date(2025, 2, 22)),
    InvoiceSeed(customer_name="Soylent", amount=300, status="paid", date=date(2025, 1, 5)),
    InvoiceSeed(customer_name="Soylent", amount=680, status="pending", date=date(2025, 3, 11)),
    InvoiceSeed(customer_name="Blue Bottle", amount=220, status="paid", date=date(2025, 1, 8)),
    InvoiceSeed(customer_name="Blue Bottle", amount=420, status="pending", date=date(2025, 2, 9)),
    InvoiceSeed(customer_name="Orange Inc", amount=615, status="paid", date=date(2025, 3, 2)),
    InvoiceSeed(customer_name="Lime Green", amount=155, status="paid", date=date(2025, 1, 12)),
    InvoiceSeed(customer_name="Lime Green", amount=710, status="pending", date=date(2025, 3, 17)),
    InvoiceSeed(customer_name="Pink Panther", amount=370, status="paid", date=date(2025, 2, 4)),
    InvoiceSeed(customer_name="Red Rocket", amount=990, status="pending", date=date(2025, 2, 14)),
    InvoiceSeed(customer_name="Yellow Bird", amount=260, status="paid", date=date(2025, 3, 7)),
]
