"""Constants and operator-facing texts.

Note: UI language is Arabic (right-to-left); keep texts here instead of
spreading string literals across controllers.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_TIME_FORMAT = "%H:%M"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"

NOT_RECORDED = "لم يسجل"

CSV_HEADERS = ("اسم الموظف", "رقم الموظف", "وقت الحضور", "وقت الانصراف", "التاريخ")
CSV_FILENAME_TEMPLATE = "attendance_{day}.csv"

MSG_CHECK_IN_FAILED = "حدث خطأ في تسجيل الحضور"
MSG_CHECK_OUT_FAILED = "حدث خطأ في تسجيل الانصراف"
MSG_ADD_EMPLOYEE_FAILED = "حدث خطأ في إضافة الموظف"
MSG_INVALID_DATE = "تاريخ غير صالح، تم عرض تاريخ اليوم"
MSG_BAD_REQUEST = "طلب غير صالح"
MSG_EXPORT_FAILED = "تعذر تحميل سجلات الحضور، لم يتم التصدير"
