from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone

import pandas as pd
from faker import Faker

from config import DEFAULT_SITE_NAME, DEFAULT_THEME_COLORS
from data.forms import hash_password


fake = Faker()

# Also used as the listing fallback when the live backend fails.
SAMPLE_TEACHERS = [
    {
        "id": "1",
        "name": "سارة أحمد",
        "specialization": "محادثة وقواعد",
        "rating": 4.9,
        "reviews": 127,
        "hourly_rate": 150,
        "experience": 5,
        "languages": ["العربية", "الإنجليزية", "الفرنسية"],
        "image_url": None,
        "is_online": True,
        "bio": "معلمة لغة إنجليزية متخصصة في المحادثة والقواعد للمبتدئين والمستوى المتوسط.",
        "education": "بكالوريوس آداب اللغة الإنجليزية - جامعة القاهرة",
        "certifications": ["CELTA", "TESOL"],
    },
    {
        "id": "2",
        "name": "مايكل جونسون",
        "specialization": "IELTS & TOEFL",
        "rating": 4.8,
        "reviews": 203,
        "hourly_rate": 200,
        "experience": 8,
        "languages": ["الإنجليزية", "الإسبانية"],
        "image_url": None,
        "is_online": False,
        "bio": "Exam preparation specialist with a track record of band 7+ IELTS results.",
        "education": "MA Applied Linguistics - University of Leeds",
        "certifications": ["DELTA", "IELTS Examiner"],
    },
    {
        "id": "3",
        "name": "إيما سميث",
        "specialization": "إنجليزية الأعمال",
        "rating": 4.7,
        "reviews": 89,
        "hourly_rate": 180,
        "experience": 3,
        "languages": ["الإنجليزية", "الألمانية"],
        "image_url": None,
        "is_online": True,
        "bio": "Business English coach for presentations, meetings and interviews.",
        "education": "BA Business Communication",
        "certifications": ["TEFL"],
    },
]

SAMPLE_COURSES = [
    {
        "id": "1",
        "title": "المحادثة الإنجليزية للمبتدئين",
        "description": "تعلم أساسيات المحادثة الإنجليزية من الصفر مع التركيز على النطق الصحيح والثقة في التحدث",
        "level": "مبتدئ",
        "duration": "8 أسابيع",
        "students": 1250,
        "rating": 4.8,
        "price": 1200,
        "instructor": "سارة أحمد",
        "image_url": None,
        "category": "محادثة",
        "features": ["دروس تفاعلية", "ممارسة يومية", "شهادة معتمدة"],
        "content_outline": ["التحية والتعارف", "الحياة اليومية", "السفر والتسوق"],
        "prerequisites": [],
    },
    {
        "id": "2",
        "title": "IELTS التحضير الشامل",
        "description": "دورة متكاملة للتحضير لامتحان IELTS مع استراتيجيات مثبتة لتحقيق أعلى الدرجات",
        "level": "متقدم",
        "duration": "12 أسبوع",
        "students": 890,
        "rating": 4.9,
        "price": 2400,
        "instructor": "مايكل جونسون",
        "image_url": None,
        "category": "امتحانات",
        "features": ["امتحانات تجريبية", "تقييم شخصي", "ضمان النتيجة"],
        "content_outline": ["Listening", "Reading", "Writing Task 1 & 2", "Speaking"],
        "prerequisites": ["مستوى متوسط في الإنجليزية"],
    },
    {
        "id": "3",
        "title": "إنجليزية الأعمال المتقدمة",
        "description": "طور مهاراتك في الإنجليزية المهنية للتفوق في بيئة العمل والحصول على فرص أفضل",
        "level": "متوسط",
        "duration": "10 أسابيع",
        "students": 675,
        "rating": 4.7,
        "price": 1800,
        "instructor": "إيما سميث",
        "image_url": None,
        "category": "أعمال",
        "features": ["مهارات العرض", "كتابة المراسلات", "مقابلات العمل"],
        "content_outline": ["الاجتماعات", "العروض التقديمية", "البريد الإلكتروني المهني"],
        "prerequisites": [],
    },
    {
        "id": "4",
        "title": "القواعد الإنجليزية المبسطة",
        "description": "اتقن قواعد اللغة الإنجليزية بطريقة سهلة ومفهومة مع تمارين تطبيقية شاملة",
        "level": "مبتدئ",
        "duration": "6 أسابيع",
        "students": 1500,
        "rating": 4.6,
        "price": 800,
        "instructor": "أحمد محمد",
        "image_url": None,
        "category": "قواعد",
        "features": ["شرح مبسط", "تمارين متدرجة", "مراجعة مستمرة"],
        "content_outline": ["الأزمنة", "أدوات التعريف", "الجمل الشرطية"],
        "prerequisites": [],
    },
]

DEMO_ADMIN_EMAIL = "admin@example.com"
DEMO_ADMIN_PASSWORD = "admin123"

BOOKING_STATUSES = ["pending", "confirmed", "cancelled", "completed"]


def _stamp(days_ago: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days_ago)).isoformat()


def teachers_mock() -> pd.DataFrame:
    return pd.DataFrame([dict(t) for t in SAMPLE_TEACHERS])


def courses_mock() -> pd.DataFrame:
    return pd.DataFrame([dict(c) for c in SAMPLE_COURSES])


def bookings_mock(n_rows: int = 12) -> list[dict]:
    random.seed(17)
    Faker.seed(17)
    today = date.today()
    rows = []
    for i in range(n_rows):
        teacher = random.choice(SAMPLE_TEACHERS)
        lesson_day = today + timedelta(days=random.randint(-14, 21))
        rows.append(
            {
                "id": f"b{i + 1}",
                "teacher_id": teacher["id"],
                "student_name": fake.name(),
                "student_email": fake.email(),
                "student_phone": fake.phone_number(),
                "lesson_date": lesson_day.isoformat(),
                "lesson_time": f"{random.randint(9, 20):02d}:00",
                "lesson_notes": fake.sentence() if random.random() < 0.5 else None,
                "status": random.choice(BOOKING_STATUSES),
                "created_at": _stamp(n_rows - i),
            }
        )
    return rows


def payment_methods_mock() -> list[dict]:
    return [
        {
            "id": "p1",
            "name": "Vodafone Cash",
            "type": "mobile_wallet",
            "details": "010 0000 0000",
            "is_active": True,
            "created_at": _stamp(30),
        },
        {
            "id": "p2",
            "name": "InstaPay",
            "type": "instant_payment",
            "details": "englishgang@instapay",
            "is_active": True,
            "created_at": _stamp(20),
        },
        {
            "id": "p3",
            "name": "Bank transfer",
            "type": "bank_account",
            "details": "IBAN EG00 0000 0000 0000 0000 0000 000",
            "is_active": False,
            "created_at": _stamp(10),
        },
    ]


def seed_tables() -> dict[str, list[dict]]:
    """Initial contents of every table for demo mode."""
    teachers = [dict(t, created_at=_stamp(60 - i)) for i, t in enumerate(SAMPLE_TEACHERS)]
    courses = [dict(c, created_at=_stamp(60 - i)) for i, c in enumerate(SAMPLE_COURSES)]
    return {
        "teachers": teachers,
        "courses": courses,
        "bookings": bookings_mock(),
        "payment_methods": payment_methods_mock(),
        "admins": [
            {
                "id": "a1",
                "email": DEMO_ADMIN_EMAIL,
                "name": "Demo admin",
                "password": hash_password(DEMO_ADMIN_PASSWORD),
                "created_at": _stamp(90),
            }
        ],
        "site_settings": [{"id": "s1", "site_name": DEFAULT_SITE_NAME, "logo_url": None}],
        "theme_settings": [dict(DEFAULT_THEME_COLORS, id="t1")],
    }
