from __future__ import annotations

from typing import Optional

import streamlit as st

from components.feedback import run_write
from components.i18n import t
from components.narrative import render_data_notice
from config import AppConfig
from data.forms import COURSE_CATEGORIES, COURSE_LEVELS
from data.service import (
    delete_record,
    get_courses_admin,
    get_teachers_admin,
    records,
    save_course,
    save_teacher,
    upload_image,
)


NEW = "__new__"


def _with_image(bucket: str, backend, form: dict, upload) -> dict:
    if upload is not None:
        form["image_url"] = upload_image(backend, bucket, upload.name, upload.getvalue(), upload.type)
    return form


def _pick(rows: list[dict], label_key: str, key: str, lang: str) -> Optional[dict]:
    by_id = {str(r["id"]): r for r in rows}
    choice = st.selectbox(
        t("admin.edit", lang),
        [NEW, *by_id],
        format_func=lambda k: f"➕ {t('admin.add', lang)}" if k == NEW else str(by_id[k].get(label_key)),
        key=key,
    )
    return None if choice == NEW else by_id[choice]


def render_teachers(cfg: AppConfig, backend, lang: str) -> None:
    res = get_teachers_admin(backend)
    rows = records(res.df)

    st.dataframe(
        res.df[["name", "specialization", "hourly_rate", "rating", "reviews", "is_online"]],
        use_container_width=True,
        hide_index=True,
    )

    current = _pick(rows, "name", "admin_teacher_pick", lang)
    cur = current or {}
    fid = cur.get("id") or NEW

    with st.form(f"teacher_form_{fid}"):
        c1, c2 = st.columns(2)
        name = c1.text_input("Name", value=cur.get("name") or "")
        specialization = c2.text_input("Specialization", value=cur.get("specialization") or "")
        c3, c4, c5 = st.columns(3)
        hourly_rate = c3.number_input("Hourly rate (EGP)", min_value=0.0, step=10.0, value=float(cur.get("hourly_rate") or 0))
        experience = c4.number_input("Experience (years)", min_value=0, step=1, value=int(cur.get("experience") or 0))
        is_online = c5.checkbox(t("filter.online", lang), value=bool(cur.get("is_online")))
        languages = st.text_input("Languages (comma separated)", value=", ".join(cur.get("languages") or []))
        bio = st.text_area("Bio", value=cur.get("bio") or "")
        education = st.text_input(t("teachers.education", lang), value=cur.get("education") or "")
        certifications = st.text_area(
            f"{t('teachers.certifications', lang)} (one per line)", value="\n".join(cur.get("certifications") or [])
        )
        upload = st.file_uploader(t("admin.image", lang), type=["png", "jpg", "jpeg", "webp"])
        submitted = st.form_submit_button(t("admin.save", lang), type="primary")

    if submitted:
        form = {
            "name": name,
            "specialization": specialization,
            "hourly_rate": hourly_rate,
            "experience": experience,
            "is_online": is_online,
            "languages": languages,
            "bio": bio,
            "education": education,
            "certifications": certifications,
        }
        run_write(lambda: save_teacher(backend, _with_image(cfg.teacher_bucket, backend, form, upload), current), lang)

    if current and st.button(t("admin.delete", lang), key=f"teacher_delete_{fid}"):
        run_write(lambda: delete_record(backend, "teachers", current["id"]), lang, success_key="admin.deleted")

    render_data_notice(res.source, res.warning)


def render_courses(cfg: AppConfig, backend, lang: str) -> None:
    res = get_courses_admin(backend)
    rows = records(res.df)

    st.dataframe(
        res.df[["title", "level", "category", "price", "students", "rating", "instructor"]],
        use_container_width=True,
        hide_index=True,
    )

    current = _pick(rows, "title", "admin_course_pick", lang)
    cur = current or {}
    fid = cur.get("id") or NEW

    levels = list(COURSE_LEVELS)
    categories = list(COURSE_CATEGORIES)
    with st.form(f"course_form_{fid}"):
        title = st.text_input("Title", value=cur.get("title") or "")
        description = st.text_area("Description", value=cur.get("description") or "")
        c1, c2, c3 = st.columns(3)
        level = c1.selectbox(
            t("list.level", lang), levels, index=levels.index(cur["level"]) if cur.get("level") in levels else 0
        )
        category = c2.selectbox(
            t("list.category", lang),
            categories,
            index=categories.index(cur["category"]) if cur.get("category") in categories else 0,
        )
        duration = c3.text_input("Duration", value=cur.get("duration") or "")
        c4, c5 = st.columns(2)
        price = c4.number_input("Price (EGP)", min_value=0.0, step=50.0, value=float(cur.get("price") or 0))
        instructor = c5.text_input("Instructor", value=cur.get("instructor") or "")
        features = st.text_area(f"{t('courses.features', lang)} (one per line)", value="\n".join(cur.get("features") or []))
        content_outline = st.text_area(
            f"{t('courses.outline', lang)} (one per line)", value="\n".join(cur.get("content_outline") or [])
        )
        prerequisites = st.text_area(
            f"{t('courses.prerequisites', lang)} (one per line)", value="\n".join(cur.get("prerequisites") or [])
        )
        upload = st.file_uploader(t("admin.image", lang), type=["png", "jpg", "jpeg", "webp"])
        submitted = st.form_submit_button(t("admin.save", lang), type="primary")

    if submitted:
        form = {
            "title": title,
            "description": description,
            "level": level,
            "category": category,
            "duration": duration,
            "price": price,
            "instructor": instructor,
            "features": features,
            "content_outline": content_outline,
            "prerequisites": prerequisites,
        }
        run_write(lambda: save_course(backend, _with_image(cfg.course_bucket, backend, form, upload), current), lang)

    if current and st.button(t("admin.delete", lang), key=f"course_delete_{fid}"):
        run_write(lambda: delete_record(backend, "courses", current["id"]), lang, success_key="admin.deleted")

    render_data_notice(res.source, res.warning)
