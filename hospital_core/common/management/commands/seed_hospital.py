# hospital_core/common/management/commands/seed_hospital.py
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from hospital_core.pharmacy.models import Medicine
from hospital_core.rooms.models import Room, RoomStatus


ROOMS = [
    # (room_number, room_type, floor, daily_rate)
    ("101", "General Ward", 1, Decimal("1500.00")),
    ("102", "General Ward", 1, Decimal("1500.00")),
    ("103", "General Ward", 1, Decimal("1500.00")),
    ("201", "Private", 2, Decimal("4000.00")),
    ("202", "Private", 2, Decimal("4000.00")),
    ("203", "Semi-Private", 2, Decimal("2500.00")),
    ("301", "ICU", 3, Decimal("12000.00")),
    ("302", "ICU", 3, Decimal("12000.00")),
]

MEDICINES = [
    # (name, category, stock_quantity, price_per_unit, manufacturer)
    ("Paracetamol 500mg", "Analgesic", 500, Decimal("2.50"), "Cipla"),
    ("Ibuprofen 400mg", "Analgesic", 300, Decimal("4.00"), "Abbott"),
    ("Amoxicillin 500mg", "Antibiotic", 200, Decimal("8.75"), "Sun Pharma"),
    ("Azithromycin 250mg", "Antibiotic", 150, Decimal("22.00"), "Cipla"),
    ("Cetirizine 10mg", "Antihistamine", 400, Decimal("1.80"), "Dr. Reddy's"),
    ("Omeprazole 20mg", "Antacid", 250, Decimal("5.20"), "Lupin"),
    ("Metformin 500mg", "Antidiabetic", 350, Decimal("3.10"), "USV"),
    ("Amlodipine 5mg", "Antihypertensive", 300, Decimal("2.90"), "Torrent"),
    ("ORS Sachet", "Electrolyte", 600, Decimal("18.00"), "FDC"),
]


class Command(BaseCommand):
    help = "Seed a starter room and medicine catalog (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--rooms-only", action="store_true", help="Only seed rooms.")
        parser.add_argument("--medicines-only", action="store_true", help="Only seed medicines.")

    @transaction.atomic
    def handle(self, *args, **options):
        rooms_created = 0
        medicines_created = 0

        if not options["medicines_only"]:
            for number, room_type, floor, rate in ROOMS:
                _, was_created = Room.objects.get_or_create(
                    room_number=number,
                    defaults={
                        "room_type": room_type,
                        "floor": floor,
                        "daily_rate": rate,
                        "status": RoomStatus.AVAILABLE,
                    },
                )
                rooms_created += 1 if was_created else 0

        if not options["rooms_only"]:
            for name, category, stock, price, manufacturer in MEDICINES:
                _, was_created = Medicine.objects.get_or_create(
                    name=name,
                    defaults={
                        "category": category,
                        "stock_quantity": stock,
                        "price_per_unit": price,
                        "manufacturer": manufacturer,
                    },
                )
                medicines_created += 1 if was_created else 0

        self.stdout.write(
            self.style.SUCCESS(
                f"Hospital seeded. Newly created: rooms={rooms_created}, medicines={medicines_created}"
            )
        )
