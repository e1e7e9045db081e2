"""Reference data for demos, local development and tests.

Everything is created through the repositories, so the fixture obeys the
same rules as real input (derived names, enrollment counts, references).
"""

from datetime import date

from libs.common.logging import get_logger
from services.gateway_service.app.database import StudioDatabase

logger = get_logger(__name__)

CLIENTS = [
    {
        "name": "Emma Wilson",
        "email": "emma.wilson@mail.com",
        "phone": "+1 (555) 123-4567",
        "membership_type": "Premium",
        "status": "active",
        "join_date": date(2023, 1, 15),
        "payment_plan": "monthly",
        "payment_amount": 150,
        "next_payment_date": date(2024, 2, 15),
        "payment_status": "active",
        "notes": "Prefers morning classes",
    },
    {
        "name": "John Smith",
        "email": "john.smith@mail.com",
        "phone": "+1 (555) 234-5678",
        "membership_type": "Basic",
        "status": "active",
        "join_date": date(2023, 3, 20),
        "payment_plan": "quarterly",
        "payment_amount": 400,
        "next_payment_date": date(2024, 1, 20),
        "payment_status": "overdue",
        "notes": "Beginner level",
    },
    {
        "name": "Lisa Chen",
        "email": "lisa.chen@mail.com",
        "phone": "+1 (555) 345-6789",
        "membership_type": "Premium",
        "status": "active",
        "join_date": date(2023, 5, 10),
        "payment_plan": "annual",
        "payment_amount": 1500,
        "next_payment_date": date(2024, 5, 10),
        "payment_status": "active",
        "notes": "Advanced practitioner",
    },
]

TEACHERS = [
    {
        "name": "Sarah Johnson",
        "email": "sarah@zenyoga.com",
        "phone": "+1 (555) 123-4567",
        "specialties": ["Hatha Yoga", "Meditation"],
        "experience_level": "5+ years",
        "hourly_rate": 75,
        "color": "#10B981",
        "bio": "Certified yoga instructor with 8 years of experience",
    },
    {
        "name": "Mike Chen",
        "email": "mike@zenyoga.com",
        "phone": "+1 (555) 234-5678",
        "specialties": ["Vinyasa", "Power Yoga"],
        "experience_level": "3-5 years",
        "hourly_rate": 65,
        "color": "#3B82F6",
        "bio": "Dynamic instructor specializing in flow sequences",
    },
    {
        "name": "Anna Rodriguez",
        "email": "anna@zenyoga.com",
        "phone": "+1 (555) 345-6789",
        "specialties": ["Pilates", "Strength Training"],
        "experience_level": "3-5 years",
        "hourly_rate": 70,
        "color": "#8B5CF6",
        "bio": "Pilates expert with focus on core strength",
    },
]

# teacher / enrolled_clients are indexes into TEACHERS / CLIENTS.
CLASSES = [
    {
        "name": "Morning Vinyasa",
        "teacher": 0,
        "day": "Monday",
        "start_time": "08:00",
        "end_time": "09:00",
        "max_capacity": 20,
        "description": "Energizing flow to start your week",
        "type": "Yoga",
        "price": 25,
        "enrolled_clients": [0, 1, 2],
    },
    {
        "name": "Power Yoga",
        "teacher": 1,
        "day": "Tuesday",
        "start_time": "18:00",
        "end_time": "19:00",
        "max_capacity": 15,
        "description": "High-intensity yoga for strength building",
        "type": "Yoga",
        "price": 30,
        "enrolled_clients": [0, 2],
    },
    {
        "name": "Pilates Core",
        "teacher": 2,
        "day": "Wednesday",
        "start_time": "10:00",
        "end_time": "11:00",
        "max_capacity": 12,
        "description": "Focus on core strength and stability",
        "type": "Pilates",
        "price": 28,
        "enrolled_clients": [1],
    },
    {
        "name": "Early Bird Yoga",
        "teacher": 0,
        "day": "Friday",
        "start_time": "06:00",
        "end_time": "07:00",
        "max_capacity": 15,
        "description": "Start your day with gentle stretches",
        "type": "Yoga",
        "price": 20,
        "enrolled_clients": [0],
    },
    {
        "name": "Evening Flow",
        "teacher": 1,
        "day": "Thursday",
        "start_time": "19:30",
        "end_time": "20:30",
        "max_capacity": 18,
        "description": "Unwind with a relaxing flow",
        "type": "Yoga",
        "price": 25,
        "enrolled_clients": [1, 2],
    },
]

EMPLOYEES = [
    {
        "name": "Alex Manager",
        "email": "alex@zenyoga.com",
        "role": "manager",
        "permissions": ["all"],
        "hire_date": date(2023, 1, 1),
    },
    {
        "name": "Jamie Assistant",
        "email": "jamie@zenyoga.com",
        "role": "employee",
        "permissions": ["clients", "teachers"],
        "hire_date": date(2023, 6, 15),
    },
]

PAYMENT_RECORDS = [
    {
        "client": 0,
        "amount": 150,
        "payment_date": date(2024, 1, 15),
        "payment_method": "card",
        "notes": "Monthly Premium Membership",
    },
    {
        "client": 1,
        "amount": 400,
        "payment_date": date(2023, 10, 20),
        "payment_method": "transfer",
        "notes": "Quarterly payment - OVERDUE",
    },
    {
        "client": 2,
        "amount": 1500,
        "payment_date": date(2023, 5, 10),
        "payment_method": "card",
        "notes": "Annual membership payment",
    },
]

STUDIO_PROFILE = {
    "name": "Zen Yoga Studio",
    "email": "info@zenyoga.com",
    "phone": "+1 (555) 987-6543",
    "address": "123 Wellness Street, Mindful City, MC 12345",
    "website": "https://zenyoga.com",
    "description": "A peaceful sanctuary for yoga and wellness practices.",
}

ATTENDANCE_DATE = date(2024, 1, 22)


async def seed_fixtures(db: StudioDatabase) -> bool:
    """
    Load the reference studio. Does nothing when clients already exist.
    Returns True when data was written.
    """
    if await db.clients.list():
        logger.info("Studio already has data, skipping fixtures")
        return False

    clients = [await db.clients.create(data) for data in CLIENTS]
    teachers = [await db.teachers.create(data) for data in TEACHERS]

    classes = []
    for entry in CLASSES:
        data = {k: v for k, v in entry.items() if k != "teacher"}
        data["teacher_id"] = teachers[entry["teacher"]].id
        data["enrolled_clients"] = [clients[i].id for i in entry["enrolled_clients"]]
        classes.append(await db.classes.create(data))

    employees = [await db.employees.create(data) for data in EMPLOYEES]

    await db.attendance.create(
        {
            "person_id": clients[0].id,
            "person_type": "client",
            "class_id": classes[0].id,
            "date": ATTENDANCE_DATE,
            "status": "present",
            "notes": "",
        }
    )
    await db.attendance.create(
        {
            "person_id": teachers[0].id,
            "person_type": "teacher",
            "class_id": classes[0].id,
            "date": ATTENDANCE_DATE,
            "status": "present",
            "notes": "",
        }
    )
    await db.attendance.create(
        {
            "person_id": employees[1].id,
            "person_type": "employee",
            "date": ATTENDANCE_DATE,
            "status": "present",
            "notes": "Full day shift",
        }
    )

    for entry in PAYMENT_RECORDS:
        data = {k: v for k, v in entry.items() if k != "client"}
        data["client_id"] = clients[entry["client"]].id
        await db.payment_records.create(data)

    await db.studio.update_profile(STUDIO_PROFILE)

    logger.info(
        "Seeded fixtures: %d clients, %d teachers, %d classes, %d employees",
        len(clients),
        len(teachers),
        len(classes),
        len(employees),
    )
    return True
