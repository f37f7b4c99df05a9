# inventory_api/seed.py
"""Demo data loaded into an empty store at startup (see SEED_DATA)."""
import logging
from datetime import datetime, timezone

from inventory_api.repositories.base import (
    InventoryRepository,
    ProductRecord,
    StockHistoryRecord,
    UserRecord,
)
from inventory_api.utils.hashing import get_password_hash

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@inventory.com"
ADMIN_PASSWORD = "admin123"

# Product images from Unsplash (free to use)
_UNSPLASH = "https://images.unsplash.com/photo-{}?w=400&h=300&fit=crop"
PRODUCT_IMAGES = {
    "electronics": [
        _UNSPLASH.format("1587829741301-dc798b83add3"),  # keyboard
        _UNSPLASH.format("1625723044792-44de16ccb4e9"),  # usb hub
        _UNSPLASH.format("1527864550417-7fd91fc51a46"),  # mouse
        _UNSPLASH.format("1593642632559-0c6d3fc62b89"),  # webcam
        _UNSPLASH.format("1507003211169-0a1dd7228f2d"),  # lamp
        _UNSPLASH.format("1558618666-fcd25c85cd64"),  # headphones
        _UNSPLASH.format("1585792180666-f7347c490ee2"),  # monitor
    ],
    "furniture": [
        _UNSPLASH.format("1580480055273-228ff5388ef8"),  # chair
        _UNSPLASH.format("1518455027359-f3f8164ba6bd"),  # desk
        _UNSPLASH.format("1555041469-a586c61ea9bc"),  # sofa
        _UNSPLASH.format("1506439773649-6e0eb8cfb237"),  # shelf
    ],
    "office": [
        _UNSPLASH.format("1586075010923-2dd4570fb338"),  # paper
        _UNSPLASH.format("1513542789411-b6a5d4f31634"),  # notebook
        _UNSPLASH.format("1583485088034-697b5bc54ccd"),  # pens
        _UNSPLASH.format("1456735190827-d1262f71b8a3"),  # stapler
    ],
    "tools": [
        _UNSPLASH.format("1581147036324-c17ac41f3e8b"),  # tools
        _UNSPLASH.format("1504148455328-c376907d081c"),  # toolbox
    ],
}


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


# id, name, category, sku, quantity, price, supplier, notes, image, created, updated
PRODUCTS = [
    ("1", "Wireless Mechanical Keyboard", "Electronics", "EL-KB-001", 45, 89.99, "TechSupplies Inc.",
     "RGB backlight, Cherry MX switches", PRODUCT_IMAGES["electronics"][0], _date(2024, 1, 15), _date(2024, 11, 20)),
    ("2", "USB-C Hub 7-in-1", "Electronics", "EL-HB-002", 3, 49.99, "TechSupplies Inc.",
     "CRITICAL - Reorder immediately!", PRODUCT_IMAGES["electronics"][1], _date(2024, 2, 10), _date(2024, 11, 25)),
    ("3", "Ergonomic Office Chair Pro", "Furniture", "FN-CH-001", 12, 349.99, "ComfortSeating Ltd.",
     "Lumbar support, mesh back, adjustable arms", PRODUCT_IMAGES["furniture"][0], _date(2024, 3, 5), _date(2024, 11, 15)),
    ("4", "Premium A4 Copy Paper", "Office Supplies", "OS-PP-001", 150, 12.99, "PaperWorld",
     "500 sheets, 80gsm, bright white", PRODUCT_IMAGES["office"][0], _date(2024, 1, 20), _date(2024, 11, 10)),
    ("5", "Electric Standing Desk", "Furniture", "FN-DK-002", 8, 459.99, "ComfortSeating Ltd.",
     'Memory presets, 70" width', PRODUCT_IMAGES["furniture"][1], _date(2024, 4, 12), _date(2024, 11, 22)),
    ("6", "Wireless Ergonomic Mouse", "Electronics", "EL-MS-001", 67, 39.99, "TechSupplies Inc.",
     "Silent click, 4000 DPI", PRODUCT_IMAGES["electronics"][2], _date(2024, 2, 28), _date(2024, 11, 18)),
    ("7", "Dual Monitor Arm Stand", "Furniture", "FN-MS-001", 25, 79.99, "ComfortSeating Ltd.",
     'Supports up to 32" monitors', PRODUCT_IMAGES["furniture"][3], _date(2024, 5, 15), _date(2024, 11, 12)),
    ("8", "Premium Ballpoint Pens", "Office Supplies", "OS-PN-001", 2, 15.99, "PaperWorld",
     "CRITICAL - Box of 50, blue ink", PRODUCT_IMAGES["office"][2], _date(2024, 3, 20), _date(2024, 11, 26)),
    ("9", "LED Desk Lamp with Wireless Charger", "Electronics", "EL-LP-001", 18, 59.99, "TechSupplies Inc.",
     "5 brightness levels, USB port", PRODUCT_IMAGES["electronics"][4], _date(2024, 6, 1), _date(2024, 11, 8)),
    ("10", "Manila File Folders", "Office Supplies", "OS-FF-001", 35, 18.99, "PaperWorld",
     "Pack of 100, letter size", PRODUCT_IMAGES["office"][1], _date(2024, 4, 25), _date(2024, 11, 14)),
    ("11", "HD Webcam 1080p with Mic", "Electronics", "EL-WC-001", 5, 79.99, "TechSupplies Inc.",
     "Auto-focus, noise cancelling mic", PRODUCT_IMAGES["electronics"][3], _date(2024, 7, 10), _date(2024, 11, 24)),
    ("12", "Magnetic Whiteboard 4x3 ft", "Office Supplies", "OS-WB-001", 10, 89.99, "OfficeMax",
     "Includes markers and eraser", PRODUCT_IMAGES["office"][3], _date(2024, 8, 5), _date(2024, 11, 5)),
    ("13", "Noise Cancelling Headphones", "Electronics", "EL-HP-001", 22, 199.99, "TechSupplies Inc.",
     "30hr battery, Bluetooth 5.0", PRODUCT_IMAGES["electronics"][5], _date(2024, 8, 15), _date(2024, 11, 20)),
    ("14", '27" 4K Monitor', "Electronics", "EL-MN-001", 14, 449.99, "TechSupplies Inc.",
     "IPS panel, USB-C connectivity", PRODUCT_IMAGES["electronics"][6], _date(2024, 9, 1), _date(2024, 11, 18)),
    ("15", "Executive Leather Chair", "Furniture", "FN-CH-002", 6, 599.99, "ComfortSeating Ltd.",
     "Genuine leather, high back", PRODUCT_IMAGES["furniture"][2], _date(2024, 9, 10), _date(2024, 11, 12)),
    ("16", "Professional Tool Kit", "Tools & Hardware", "TL-KT-001", 30, 129.99, "BuildRight Tools",
     "150 pieces, lifetime warranty", PRODUCT_IMAGES["tools"][0], _date(2024, 9, 20), _date(2024, 11, 8)),
    ("17", "Heavy Duty Toolbox", "Tools & Hardware", "TL-BX-001", 4, 89.99, "BuildRight Tools",
     "LOW STOCK - Water resistant", PRODUCT_IMAGES["tools"][1], _date(2024, 10, 1), _date(2024, 11, 22)),
    ("18", "Spiral Notebooks (12 Pack)", "Office Supplies", "OS-NB-001", 85, 24.99, "PaperWorld",
     "College ruled, 70 sheets each", PRODUCT_IMAGES["office"][1], _date(2024, 10, 10), _date(2024, 11, 15)),
    ("19", "Wireless Presenter Remote", "Electronics", "EL-PR-001", 40, 34.99, "TechSupplies Inc.",
     "Laser pointer, 100ft range", PRODUCT_IMAGES["electronics"][1], _date(2024, 10, 20), _date(2024, 11, 10)),
    ("20", "Desktop Organizer Set", "Office Supplies", "OS-OR-001", 55, 32.99, "OfficeMax",
     "Mesh design, 6 compartments", PRODUCT_IMAGES["office"][3], _date(2024, 11, 1), _date(2024, 11, 25)),
]

# id, product id, product name, previous, new, type, timestamp, notes
HISTORY = [
    ("h1", "2", "USB-C Hub 7-in-1", 15, 3, "decrease", _date(2024, 11, 25), "Large corporate order fulfilled"),
    ("h2", "1", "Wireless Mechanical Keyboard", 30, 45, "increase", _date(2024, 11, 20), "Restocked from supplier"),
    ("h3", "8", "Premium Ballpoint Pens", 20, 2, "decrease", _date(2024, 11, 26), "Monthly office supply distribution"),
    ("h4", "3", "Ergonomic Office Chair Pro", 8, 12, "increase", _date(2024, 11, 15), "New shipment received"),
    ("h5", "11", "HD Webcam 1080p with Mic", 12, 5, "decrease", _date(2024, 11, 24), "Remote work equipment order"),
    ("h6", "14", '27" 4K Monitor', 20, 14, "decrease", _date(2024, 11, 18), "Office upgrade project"),
    ("h7", "17", "Heavy Duty Toolbox", 15, 4, "decrease", _date(2024, 11, 22), "Maintenance team order"),
    ("h8", "6", "Wireless Ergonomic Mouse", 50, 67, "increase", _date(2024, 11, 18), "Bulk order from supplier"),
]


def seed_repository(repository: InventoryRepository) -> None:
    """Fill an empty store with the demo admin, products and ledger."""
    with repository.transaction():
        if repository.find_user_by_email(ADMIN_EMAIL) is None:
            repository.save_user(UserRecord(
                id="1",
                name="Admin User",
                email=ADMIN_EMAIL,
                password_hash=get_password_hash(ADMIN_PASSWORD),
                role="admin",
                created_at=_date(2024, 1, 1),
            ))
            logger.info(f"Seeded admin user {ADMIN_EMAIL}")

        if repository.list_products() or repository.list_history():
            return

        # Inserts go to the head, so walk backwards to keep the listed order
        for (pid, name, category, sku, quantity, price, supplier,
             notes, image, created, updated) in reversed(PRODUCTS):
            repository.add_product(ProductRecord(
                id=pid, name=name, category=category, sku=sku, quantity=quantity,
                price=price, supplier=supplier, notes=notes, image=image,
                created_at=created, updated_at=updated,
            ))
        for hid, pid, name, previous, new, change_type, ts, notes in reversed(HISTORY):
            repository.add_history(StockHistoryRecord(
                id=hid, product_id=pid, product_name=name,
                previous_quantity=previous, new_quantity=new,
                change_amount=abs(new - previous), change_type=change_type,
                timestamp=ts, notes=notes, user_id="1",
            ))
        logger.info(f"Seeded {len(PRODUCTS)} products and {len(HISTORY)} history entries")
