from __future__ import annotations

import io

import streamlit as st

from walk_area.area import AreaParams, compute_area
from walk_area.csv_io import path_csv_text, read_path_rows
from walk_area.geo import AREA_METHODS, DEFAULT_METHOD, path_perimeter_m
from walk_area.models import GeoPoint
from walk_area.session import WalkSession
from walk_area.units import DEFAULT_UNIT, AreaUnit, convert, format_area, label, list_units

SESSION_KEY = "walk_session"


def _session() -> WalkSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = WalkSession()
    return st.session_state[SESSION_KEY]


def _replay(session: WalkSession, points: list[GeoPoint]) -> None:
    """Feed an uploaded walk through the session, as if it was just recorded."""

    if session.is_tracking:
        session.stop()
    session.start()
    for pt in points:
        session.add_point(pt)
    session.stop()


def _add_current_sample(session: WalkSession) -> None:
    session.add_sample(
        float(st.session_state["sample_lat"]),
        float(st.session_state["sample_lng"]),
        float(st.session_state["sample_acc"]),
    )


def _points_table(points: tuple[GeoPoint, ...]) -> list[dict[str, object]]:
    return [
        {"Point #": i + 1, "Latitude": f"{p.latitude:.6f}", "Longitude": f"{p.longitude:.6f}"}
        for i, p in enumerate(points)
    ]


def main() -> None:
    st.set_page_config(page_title="Geo Area Calculator", layout="centered")
    st.title("Geo Area Calculator")
    st.caption("Walk the perimeter of your land to measure its area.")

    session = _session()

    with st.sidebar:
        st.subheader("计算设置")
        method = st.selectbox(
            "面积算法",
            options=list(AREA_METHODS),
            index=list(AREA_METHODS).index(DEFAULT_METHOD),
            key="area_method",
            help="equirectangular：局部平面近似，适合几十公顷以内；spherical：球面超量",
        )

        st.subheader("导入行走路径")
        uploaded = st.file_uploader("walk_path.csv（Latitude,Longitude）", type=["csv"])
        if uploaded is not None and st.button("用该文件计算", width="stretch"):
            try:
                points, summary = read_path_rows(io.StringIO(uploaded.getvalue().decode("utf-8-sig")))
            except KeyError as exc:
                st.error(str(exc))
            else:
                _replay(session, points)
                if summary.rows_skipped:
                    st.warning(f"{summary.rows_skipped} 行解析失败已跳过")

    st.subheader("手动记录")
    c1, c2, c3 = st.columns(3)
    c1.number_input("Latitude", min_value=-90.0, max_value=90.0, value=0.0, format="%.7f", key="sample_lat")
    c2.number_input("Longitude", min_value=-180.0, max_value=180.0, value=0.0, format="%.7f", key="sample_lng")
    c3.number_input("Accuracy (m)", min_value=0.0, value=5.0, step=0.5, key="sample_acc")

    # 回调在脚本重跑之前执行，页面总是显示最新的会话状态
    b1, b2 = st.columns(2)
    if session.is_tracking:
        b1.button("Add point", key="add_point", on_click=_add_current_sample, args=(session,), width="stretch")
        b2.button("Stop Walk", key="stop_walk", on_click=session.stop, type="primary", width="stretch")
    else:
        b1.button("Start Walk", key="start_walk", on_click=session.start, type="primary", width="stretch")

    result = session.result
    points = session.points if session.is_tracking or result is None else result.points
    status = "Tracking..." if session.is_tracking else "Idle"
    st.write(f"Status: **{status}** · {len(points)} points recorded")
    if session.is_tracking and session.current_accuracy_m is not None:
        st.write(f"Accuracy: {session.current_accuracy_m:.1f}m")

    if session.error:
        st.error(session.error)

    # 面积算法只影响显示：对冻结的点快照按当前选择重新计算
    area_m2: float | None = None
    if result is not None and result.has_area:
        area_m2 = compute_area(result.points, AreaParams(method=method))
    if area_m2 is not None:
        st.subheader("Measurement Result")
        units = list_units()
        unit: AreaUnit = st.radio(
            "Unit",
            options=units,
            index=units.index(DEFAULT_UNIT),
            format_func=lambda u: u.value,
            horizontal=True,
            key="area_unit",
        )
        st.metric(label(unit), format_area(convert(area_m2, unit), unit))
        st.caption(f"Perimeter: {path_perimeter_m(result.points):.1f} m · method: {method}")

    if points:
        st.subheader("Recorded Path")
        st.download_button(
            "Export CSV",
            data=path_csv_text(points),
            file_name="walk_path.csv",
            mime="text/csv",
        )
        st.dataframe(_points_table(points), width="stretch", height=240)


if __name__ == "__main__":
    main()
