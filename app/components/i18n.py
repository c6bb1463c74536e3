"""
English / Arabic UI strings.

`t(key, lang)` returns the string for the visitor's language. A key with no
Arabic entry falls back to English, and an unknown key to the key itself.
"""

from __future__ import annotations


STRINGS: dict[str, dict[str, str]] = {
    # navigation
    "nav.home": {"en": "Home", "ar": "الرئيسية"},
    "nav.teachers": {"en": "Teachers", "ar": "المعلمين"},
    "nav.courses": {"en": "Courses", "ar": "الدورات"},
    "nav.booking": {"en": "Book a lesson", "ar": "احجز درساً"},
    "nav.about": {"en": "About us", "ar": "من نحن"},
    "nav.contact": {"en": "Contact us", "ar": "تواصل معنا"},
    "nav.admin": {"en": "Admin", "ar": "لوحة التحكم"},
    "sidebar.language": {"en": "Language", "ar": "اللغة"},
    "sidebar.settings": {"en": "Settings", "ar": "الإعدادات"},
    "sidebar.use_mock": {"en": "Demo mode (sample data)", "ar": "وضع العرض (بيانات تجريبية)"},
    "sidebar.use_mock_help": {
        "en": "When off, the site talks to Supabase. Listing failures fall back to sample data.",
        "ar": "عند الإيقاف يتصل الموقع بـ Supabase، وعند الفشل تُعرض بيانات تجريبية.",
    },
    "data.source": {"en": "Data", "ar": "البيانات"},
    # home
    "home.hero_title": {"en": "Learn English with the best teachers", "ar": "تعلم الإنجليزية مع أفضل المعلمين"},
    "home.hero_body": {
        "en": "Live one-to-one lessons, structured courses and exam preparation, all online.",
        "ar": "دروس مباشرة فردية، ودورات منظمة، وتحضير للامتحانات، كلها عبر الإنترنت.",
    },
    "home.why": {"en": "Why study with us", "ar": "لماذا تتعلم معنا"},
    "home.value1_title": {"en": "Qualified teachers", "ar": "معلمون مؤهلون"},
    "home.value1_body": {"en": "Certified native and bilingual tutors.", "ar": "معلمون معتمدون من متحدثين أصليين وثنائيي اللغة."},
    "home.value2_title": {"en": "Flexible schedule", "ar": "مواعيد مرنة"},
    "home.value2_body": {"en": "Book any hour from 9:00 to 20:00.", "ar": "احجز أي ساعة من 9:00 حتى 20:00."},
    "home.value3_title": {"en": "Fair prices", "ar": "أسعار مناسبة"},
    "home.value3_body": {"en": "Pay per lesson in EGP, no subscription.", "ar": "ادفع لكل درس بالجنيه المصري دون اشتراك."},
    "home.featured_teachers": {"en": "Top rated teachers", "ar": "المعلمون الأعلى تقييماً"},
    "home.featured_courses": {"en": "Popular courses", "ar": "الدورات الأكثر شعبية"},
    # listings
    "list.search": {"en": "Search", "ar": "بحث"},
    "list.search_teachers": {"en": "Search by teacher or specialization...", "ar": "ابحث عن معلم أو تخصص..."},
    "list.search_courses": {"en": "Search for a course...", "ar": "ابحث عن دورة..."},
    "list.sort": {"en": "Sort by", "ar": "ترتيب حسب"},
    "list.filter": {"en": "Filter", "ar": "فلترة"},
    "list.level": {"en": "Level", "ar": "المستوى"},
    "list.category": {"en": "Category", "ar": "التصنيف"},
    "list.found": {"en": "Results found", "ar": "عدد النتائج"},
    "list.none": {"en": "No results found", "ar": "لم يتم العثور على نتائج"},
    "list.none_hint": {"en": "Try different words or clear the filters.", "ar": "جرب البحث بكلمات مختلفة أو غير المرشحات"},
    "list.reset": {"en": "Reset filters", "ar": "إعادة تعيين الفلاتر"},
    "sort.rating": {"en": "Highest rated", "ar": "الأعلى تقييماً"},
    "sort.reviews": {"en": "Most reviewed", "ar": "الأكثر تقييماً"},
    "sort.students": {"en": "Most enrolled", "ar": "الأكثر التحاقاً"},
    "sort.price-low": {"en": "Price (low to high)", "ar": "السعر (الأقل أولاً)"},
    "sort.price-high": {"en": "Price (high to low)", "ar": "السعر (الأعلى أولاً)"},
    "filter.all": {"en": "All", "ar": "الكل"},
    "filter.online": {"en": "Online now", "ar": "متصل الآن"},
    "filter.offline": {"en": "Offline", "ar": "غير متصل"},
    "teachers.title": {"en": "Choose your teacher", "ar": "اختر معلمك المثالي"},
    "teachers.subtitle": {
        "en": "Learn English with qualified teachers from around the world",
        "ar": "تعلم الإنجليزية مع أفضل المعلمين المؤهلين من جميع أنحاء العالم",
    },
    "teachers.years": {"en": "years of experience", "ar": "سنوات خبرة"},
    "teachers.per_hour": {"en": "EGP / hour", "ar": "جنيه / ساعة"},
    "teachers.reviews": {"en": "reviews", "ar": "تقييم"},
    "teachers.profile": {"en": "View profile", "ar": "عرض الملف"},
    "teachers.book": {"en": "Book a lesson", "ar": "احجز درساً"},
    "teachers.not_found": {"en": "Teacher not found", "ar": "لم يتم العثور على المعلم"},
    "teachers.education": {"en": "Education", "ar": "التعليم"},
    "teachers.certifications": {"en": "Certifications", "ar": "الشهادات"},
    "teachers.languages": {"en": "Languages", "ar": "اللغات"},
    "teachers.back": {"en": "Back to teachers", "ar": "العودة إلى المعلمين"},
    "courses.title": {"en": "Our courses", "ar": "دوراتنا التعليمية"},
    "courses.subtitle": {
        "en": "Courses designed around your learning goals",
        "ar": "اختر من مجموعة متنوعة من الدورات المصممة خصيصاً لتحقيق أهدافك التعليمية",
    },
    "courses.students": {"en": "students", "ar": "طالب"},
    "courses.details": {"en": "Course details", "ar": "تفاصيل الدورة"},
    "courses.not_found": {"en": "Course not found", "ar": "لم يتم العثور على الدورة"},
    "courses.back": {"en": "Back to courses", "ar": "العودة إلى الدورات"},
    "courses.outline": {"en": "Course content", "ar": "محتوى الدورة"},
    "courses.prerequisites": {"en": "Prerequisites", "ar": "المتطلبات المسبقة"},
    "courses.features": {"en": "What you get", "ar": "مميزات الدورة"},
    "courses.register": {"en": "Register", "ar": "سجل الآن"},
    "courses.register_soon": {
        "en": "Course registration is coming soon.",
        "ar": "نظام التسجيل في الدورات قادم قريباً.",
    },
    "courses.currency": {"en": "EGP", "ar": "جنيه"},
    # booking
    "booking.title": {"en": "Book your lesson now", "ar": "احجز درسك الآن"},
    "booking.subtitle": {
        "en": "Choose your teacher and a time that suits you",
        "ar": "اختر معلمك والوقت المناسب لك وابدأ رحلتك",
    },
    "booking.teacher": {"en": "Teacher", "ar": "المعلم"},
    "booking.date": {"en": "Lesson date", "ar": "تاريخ الدرس"},
    "booking.time": {"en": "Lesson time", "ar": "وقت الدرس"},
    "booking.name": {"en": "Full name", "ar": "الاسم الكامل"},
    "booking.email": {"en": "Email", "ar": "البريد الإلكتروني"},
    "booking.phone": {"en": "Phone (optional)", "ar": "رقم الهاتف (اختياري)"},
    "booking.notes": {"en": "Notes for the teacher", "ar": "ملاحظات للمعلم"},
    "booking.submit": {"en": "Confirm booking", "ar": "تأكيد الحجز"},
    "booking.success": {"en": "Booking successful!", "ar": "تم الحجز بنجاح!"},
    "booking.failed": {
        "en": "An error occurred while trying to book. Please try again.",
        "ar": "حدث خطأ أثناء الحجز. حاول مرة أخرى.",
    },
    "booking.no_teachers": {"en": "No teachers are available right now.", "ar": "لا يوجد معلمون متاحون حالياً."},
    "booking.teacher_unavailable": {
        "en": "This teacher is not taking bookings right now. Please choose another teacher.",
        "ar": "هذا المعلم لا يستقبل حجوزات حالياً. يرجى اختيار معلم آخر.",
    },
    "booking.choose_teacher": {"en": "Choose a teacher", "ar": "اختر المعلم"},
    "booking.payment": {"en": "Payment methods", "ar": "طرق الدفع"},
    # contact / about
    "contact.title": {"en": "Contact us", "ar": "تواصل معنا"},
    "contact.subtitle": {
        "en": "We're here to answer your questions",
        "ar": "نحن هنا للإجابة على جميع استفساراتك ومساعدتك في رحلتك التعليمية",
    },
    "contact.subject": {"en": "Subject", "ar": "الموضوع"},
    "contact.message": {"en": "Message", "ar": "الرسالة"},
    "contact.send": {"en": "Send message", "ar": "إرسال الرسالة"},
    "contact.sent": {"en": "Thanks! We'll get back to you soon.", "ar": "شكراً لك! سنتواصل معك قريباً."},
    "about.title": {"en": "About us", "ar": "من نحن"},
    "about.body": {
        "en": "We connect Arabic-speaking learners with experienced English teachers for live lessons and structured courses.",
        "ar": "نربط المتعلمين الناطقين بالعربية بمعلمي لغة إنجليزية ذوي خبرة من خلال دروس مباشرة ودورات منظمة.",
    },
    "about.mission": {"en": "Our mission", "ar": "مهمتنا"},
    "about.mission_body": {
        "en": "Make confident English speakers, one lesson at a time.",
        "ar": "أن نصنع متحدثين واثقين بالإنجليزية، درساً بعد درس.",
    },
    # admin
    "admin.login": {"en": "Admin sign in", "ar": "تسجيل دخول المدير"},
    "admin.password": {"en": "Password", "ar": "كلمة المرور"},
    "admin.sign_in": {"en": "Sign in", "ar": "تسجيل الدخول"},
    "admin.sign_out": {"en": "Sign out", "ar": "تسجيل الخروج"},
    "admin.demo_hint": {"en": "Demo mode login", "ar": "بيانات دخول وضع العرض"},
    "admin.overview": {"en": "Overview", "ar": "نظرة عامة"},
    "admin.teachers": {"en": "Teachers", "ar": "المعلمين"},
    "admin.courses": {"en": "Courses", "ar": "الدورات"},
    "admin.bookings": {"en": "Bookings", "ar": "الحجوزات"},
    "admin.payments": {"en": "Payments", "ar": "طرق الدفع"},
    "admin.site": {"en": "Site settings", "ar": "إعدادات الموقع"},
    "admin.theme": {"en": "Theme", "ar": "الثيم"},
    "admin.admins": {"en": "Admins", "ar": "المديرين"},
    "admin.saved": {"en": "Saved", "ar": "تم الحفظ"},
    "admin.deleted": {"en": "Deleted", "ar": "تم الحذف"},
    "admin.save": {"en": "Save", "ar": "حفظ"},
    "admin.delete": {"en": "Delete", "ar": "حذف"},
    "admin.edit": {"en": "Edit", "ar": "تعديل"},
    "admin.add": {"en": "Add new", "ar": "إضافة جديد"},
    "admin.error": {"en": "Something went wrong", "ar": "حدث خطأ"},
    "admin.image": {"en": "Image", "ar": "الصورة"},
    "admin.reset_theme": {"en": "Reset to defaults", "ar": "إعادة تعيين للافتراضي"},
    "admin.primary": {"en": "Primary color", "ar": "اللون الأساسي"},
    "admin.secondary": {"en": "Secondary color", "ar": "اللون الثانوي"},
    "admin.accent": {"en": "Accent color", "ar": "لون التركيز"},
    "admin.site_name": {"en": "Site name", "ar": "اسم الموقع"},
    "admin.logo": {"en": "Logo", "ar": "الشعار"},
    "admin.status": {"en": "Status", "ar": "الحالة"},
    "admin.pending": {"en": "Pending", "ar": "قيد الانتظار"},
    "admin.active": {"en": "Active", "ar": "مفعل"},
}


def t(key: str, lang: str = "en") -> str:
    entry = STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def is_rtl(lang: str) -> bool:
    return lang == "ar"
