"""
calpick.locales.standard
------------------------
Built-in locale table. `en` is the historical default; the others add
Monday-start and right-to-left conventions.
"""

from __future__ import annotations
from typing import Dict

from .locale import Locale

EN = Locale(
    key="en",
    days=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    days_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    days_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    months=("January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December"),
    months_short=("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                  "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    today="Today",
    clear="Clear",
)

DE = Locale(
    key="de",
    days=("Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag"),
    days_short=("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"),
    days_min=("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"),
    months=("Januar", "Februar", "März", "April", "Mai", "Juni",
            "Juli", "August", "September", "Oktober", "November", "Dezember"),
    months_short=("Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
                  "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"),
    today="Heute",
    clear="Löschen",
    week_start=1,
)

FR = Locale(
    key="fr",
    days=("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"),
    days_short=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
    days_min=("D", "L", "Ma", "Me", "J", "V", "S"),
    months=("janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre"),
    months_short=("janv.", "févr.", "mars", "avr.", "mai", "juin",
                  "juil.", "août", "sept.", "oct.", "nov.", "déc."),
    today="Aujourd'hui",
    clear="Effacer",
    week_start=1,
)

ES = Locale(
    key="es",
    days=("domingo", "lunes", "martes", "miércoles", "jueves", "viernes", "sábado"),
    days_short=("dom", "lun", "mar", "mié", "jue", "vie", "sáb"),
    days_min=("Do", "Lu", "Ma", "Mi", "Ju", "Vi", "Sá"),
    months=("enero", "febrero", "marzo", "abril", "mayo", "junio",
            "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre"),
    months_short=("ene", "feb", "mar", "abr", "may", "jun",
                  "jul", "ago", "sep", "oct", "nov", "dic"),
    today="Hoy",
    clear="Borrar",
    week_start=1,
)

HE = Locale(
    key="he",
    days=("ראשון", "שני", "שלישי", "רביעי", "חמישי", "שישי", "שבת"),
    days_short=("א׳", "ב׳", "ג׳", "ד׳", "ה׳", "ו׳", "ש׳"),
    days_min=("א", "ב", "ג", "ד", "ה", "ו", "ש"),
    months=("ינואר", "פברואר", "מרץ", "אפריל", "מאי", "יוני",
            "יולי", "אוגוסט", "ספטמבר", "אוקטובר", "נובמבר", "דצמבר"),
    months_short=("ינו׳", "פבר׳", "מרץ", "אפר׳", "מאי", "יוני",
                  "יולי", "אוג׳", "ספט׳", "אוק׳", "נוב׳", "דצמ׳"),
    today="היום",
    clear="נקה",
    rtl=True,
    week_start=0,
    work_week=(0, 1, 2, 3, 4),
)

AR = Locale(
    key="ar",
    days=("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"),
    days_short=("أحد", "اثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"),
    days_min=("ح", "ن", "ث", "ر", "خ", "ج", "س"),
    months=("يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
            "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"),
    months_short=("يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
                  "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر"),
    today="اليوم",
    clear="مسح",
    rtl=True,
    week_start=6,
    work_week=(0, 1, 2, 3, 4),
)

STANDARD_LOCALES: Dict[str, Locale] = {loc.key: loc for loc in (EN, DE, FR, ES, HE, AR)}
