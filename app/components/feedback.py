from __future__ import annotations

import logging
from typing import Callable

import streamlit as st

from components.i18n import t
from data.connection import BackendError
from data.forms import ValidationError


log = logging.getLogger(__name__)


def run_write(action: Callable[[], object], lang: str, success_key: str = "admin.saved") -> None:
    """
    Runs an admin write. Bad input or a backend failure shows an error and keeps
    the page as it was; success shows a toast and reruns so lists refresh.
    """
    try:
        action()
    except ValidationError as e:
        st.error(str(e))
        return
    except BackendError as e:
        log.error("Write failed: %s", e)
        st.error(f"{t('admin.error', lang)}: {e}")
        return
    st.toast(t(success_key, lang), icon="✅")
    st.rerun()
