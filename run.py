# run.py — Dashboard
# =============================================================================
# VIVEIROS: previsões por viveiro em 2 colunas (cards)
# CONSUMO: registros ofertado x consumido + cadastro/remoção de viveiros
# TRATO: cronograma por idade + curva de biomassa + caderno de trato
# CLIMA: leitura atual e recomendações de manejo
# =============================================================================

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Tuple

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from config.settings import (
    DEFAULT_PRAWN_AGE_DAYS, DEFAULT_STOCKING_DENSITY, LOG_LEVEL, OPENWEATHER_CITY,
    WEATHER_REFRESH_MINUTES,
)
from src.domain.engine.feeding_schedule import estimate_biomass_kg
from src.domain.entities.feeding_record import PondFeedingRecord
from src.domain.enums import AreaUnit, GrowthRate, PondStatus, RiskLevel, Severity
from src.domain.value_objects import WeatherReading
from src.domain.use_cases.feeding_log_use_case import FeedingLogUseCase
from src.domain.use_cases.generate_analytics_use_case import GenerateAnalyticsUseCase
from src.domain.use_cases.manage_ponds_use_case import DeletePondUseCase, RegisterPondUseCase
from src.domain.use_cases.monitor_weather_use_case import MonitorWeatherUseCase
from src.domain.use_cases.plan_feeding_use_case import PlanFeedingUseCase
from src.domain.use_cases.predict_ponds_use_case import PredictPondsUseCase
from src.domain.use_cases.record_feed_intake_use_case import RecordFeedIntakeUseCase
from src.infrastructure.database.migrations import run_migrations
from src.infrastructure.database.sqlite_repositories import (
    SQLiteFeedIntakeRepo, SQLiteFeedingRecordRepo, SQLitePondRepo,
)
from src.infrastructure.weather.openweather_client import WeatherService

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
log = logging.getLogger("camarao.dashboard")

st.set_page_config(page_title="CamarãoSync", layout="wide")

# =============================================================================
# ROTAS / NAV INFERIOR
# =============================================================================
ROUTES = ("home", "pond", "feeding", "weather")
if "route" not in st.session_state:
    st.session_state.route = "home"

def navigate(to: str, **params):
    st.session_state.route = to
    for k, v in params.items():
        st.session_state[f"param_{k}"] = v
    st.rerun()

def bottom_nav(active: str):
    st.markdown("""
    <style>
    .bottom-nav{
      position:fixed;bottom:0;left:0;right:0;background:rgba(11,18,32,.95);
      border-top:1px solid rgba(34,211,238,.2);padding:8px 12px;z-index:9999;height:56px;
    }
    .bottom-grid{display:grid;grid-template-columns:repeat(4,1fr);gap:6px;max-width:720px;margin:0 auto;}
    </style>
    """, unsafe_allow_html=True)

    with st.container():
        st.markdown('<div class="bottom-nav"><div class="bottom-grid">', unsafe_allow_html=True)
        cols = st.columns(4)
        items = [("Viveiros", "home"), ("Consumo", "pond"), ("Trato", "feeding"), ("Clima", "weather")]
        for col, (label, route) in zip(cols, items):
            if col.button(label, key=f"bn_{route}", use_container_width=True,
                          type="primary" if route == active else "secondary"):
                navigate(route)
        st.markdown('</div></div>', unsafe_allow_html=True)

# =============================================================================
# CSS BASE
# =============================================================================
def load_base_css():
    st.markdown("""
    <style>
    :root{
      --primary:#22d3ee; --bg:#0b1220; --text:#e2e8f0; --sub:#cbd5e1; --muted:#64748b;
      --ok:#10b981; --warn:#f59e0b; --err:#ef4444; --border:rgba(226,232,240,.08);
    }
    [data-testid="stHeader"]{display:none!important}
    .block-container{padding:8px 10px 72px 10px!important;max-width:1100px!important}
    .card{
      background:linear-gradient(145deg,rgba(15,23,42,.85),rgba(30,41,59,.35));
      border:1px solid var(--border);border-radius:12px;padding:12px;margin-bottom:8px;
    }
    .pond-top{display:flex;justify-content:space-between;align-items:center}
    .pond-name{font-weight:800;color:var(--text)}
    .pond-meta{font-size:.85rem;color:var(--sub)}
    .badge{padding:2px 10px;border-radius:10px;font-weight:700;font-size:.8rem;color:#0b1220}
    .mini-metrics{display:grid;grid-template-columns:repeat(4,1fr);gap:8px;margin-top:8px}
    .mini{background:rgba(2,6,23,.2);border:1px solid var(--border);border-radius:10px;padding:8px;text-align:center}
    .mini .lbl{font-size:.75rem;color:var(--muted)}
    .mini .val{font-weight:800;color:var(--text);line-height:1.2}
    .rec{font-size:.85rem;color:var(--sub);margin:2px 0}
    </style>
    """, unsafe_allow_html=True)

# =============================================================================
# CORES / RÓTULOS
# =============================================================================
GROWTH_COLORS = {
    GrowthRate.ACCELERATED: "#10b981",
    GrowthRate.NORMAL: "#22d3ee",
    GrowthRate.REDUCED: "#f59e0b",
    GrowthRate.SEVERELY_REDUCED: "#ef4444",
}
RISK_COLORS = {
    RiskLevel.LOW: "#10b981",
    RiskLevel.MEDIUM: "#f59e0b",
    RiskLevel.HIGH: "#f97316",
    RiskLevel.CRITICAL: "#ef4444",
}
SEVERITY_COLORS = {Severity.LOW: "#22d3ee", Severity.MEDIUM: "#f59e0b", Severity.HIGH: "#ef4444"}
BAND_COLORS = {"bom": "#10b981", "atencao": "#f59e0b", "ruim": "#ef4444"}

GROWTH_PT = {
    GrowthRate.ACCELERATED: "Acelerado",
    GrowthRate.NORMAL: "Normal",
    GrowthRate.REDUCED: "Reduzido",
    GrowthRate.SEVERELY_REDUCED: "Muito reduzido",
}
RISK_PT = {RiskLevel.LOW: "Baixo", RiskLevel.MEDIUM: "Médio", RiskLevel.HIGH: "Alto", RiskLevel.CRITICAL: "Crítico"}
STATUS_PT = {PondStatus.ACTIVE: "Ativo", PondStatus.INACTIVE: "Inativo", PondStatus.MAINTENANCE: "Manutenção"}
UOM_PT = {AreaUnit.HECTARES: "ha", AreaUnit.ACRES: "acres"}

def fmt_num(v, casas=2) -> str:
    """Formata número no padrão brasileiro (vírgula decimal)."""
    try:
        x = float(v)
    except (TypeError, ValueError):
        return "—"
    s = f"{x:,.{casas}f}"
    return s.replace(",", " ").replace(".", ",").replace(" ", ".")

def badge(text: str, color: str) -> str:
    return f'<span class="badge" style="background:{color}">{text}</span>'

# =============================================================================
# REPOSITÓRIOS / CLIMA
# =============================================================================
pond_repo = SQLitePondRepo()
intake_repo = SQLiteFeedIntakeRepo()
record_repo = SQLiteFeedingRecordRepo()

@st.cache_data(ttl=WEATHER_REFRESH_MINUTES * 60)
def get_weather() -> Tuple[WeatherReading, Optional[str]]:
    service = WeatherService()
    reading = service()
    log.info("weather_loaded source=%s", service.last_source)
    return reading, service.last_source

# =============================================================================
# VIVEIROS (HOME)
# =============================================================================
def page_home(weather: WeatherReading):
    ponds = pond_repo.list_all()
    active = [p for p in ponds if p.is_active]
    st.markdown(f"""
    <div class="card pond-top">
      <h4 style="margin:0;">Viveiros ativos</h4>
      <div class="pond-meta">{len(active)} de {len(ponds)}</div>
    </div>
    """, unsafe_allow_html=True)

    if not active:
        st.info("Nenhum viveiro ativo. Cadastre um na aba Consumo.")
        return

    res = PredictPondsUseCase(pond_repo, intake_repo).execute(weather)

    cols = st.columns(2, gap="large")
    for idx, pond in enumerate(active):
        pred = res.predictions[pond.id]
        rate = res.consumption_rates[pond.id]
        origem = "registros" if res.sources[pond.id] == "registrado" else "estimado"
        recs = "".join(f'<div class="rec">• {r}</div>' for r in pred.recommendations)
        with cols[idx % 2]:
            st.markdown(f"""
            <div class="card">
              <div class="pond-top">
                <div>
                  <div class="pond-name">{pond.pond_number}</div>
                  <div class="pond-meta">{fmt_num(pond.size, 1)} {UOM_PT[pond.uom]} · {pond.feeding_type or '—'}
                    · consumo {fmt_num(rate, 1)}% ({origem})</div>
                </div>
                <div>{badge(RISK_PT[pred.risk_level], RISK_COLORS[pred.risk_level])}</div>
              </div>
              <div class="mini-metrics">
                <div class="mini"><div class="lbl">Crescimento</div>
                  <div class="val" style="color:{GROWTH_COLORS[pred.growth_rate]}">{GROWTH_PT[pred.growth_rate]}</div></div>
                <div class="mini"><div class="lbl">Sobrevivência</div><div class="val">{fmt_num(pred.survival_rate_pct, 0)}%</div></div>
                <div class="mini"><div class="lbl">Dias p/ despesca</div><div class="val">{pred.days_to_harvest}</div></div>
                <div class="mini"><div class="lbl">CA (FCR)</div><div class="val">{fmt_num(pred.fcr)}</div></div>
              </div>
              <div style="margin-top:8px;">{recs}</div>
            </div>
            """, unsafe_allow_html=True)
            if st.button("Abrir consumo", key=f"open_{pond.id}", use_container_width=True):
                navigate("pond", pond_id=pond.id)

    df = pd.DataFrame([
        {"viveiro": p.pond_number, "risco": res.predictions[p.id].risk_level.value,
         "sobrevivencia": res.predictions[p.id].survival_rate_pct}
        for p in active
    ])
    fig = go.Figure(go.Bar(
        x=df["viveiro"], y=df["sobrevivencia"],
        marker_color=[RISK_COLORS[RiskLevel(r)] for r in df["risco"]],
        hovertemplate="<b>%{x}</b><br>Sobrevivência: %{y:.0f}%<extra></extra>",
    ))
    fig.update_layout(
        paper_bgcolor='rgba(0,0,0,0)', plot_bgcolor='rgba(0,0,0,0)',
        font=dict(color='#cbd5e1'), yaxis=dict(title="Sobrevivência prevista (%)", range=[0, 100]),
        margin=dict(l=6, r=6, t=6, b=6), height=260,
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

# =============================================================================
# CONSUMO
# =============================================================================
def page_pond():
    ponds = pond_repo.list_all()

    with st.expander("Cadastrar viveiro", expanded=not ponds):
        with st.form("new_pond", clear_on_submit=True):
            c1, c2, c3 = st.columns(3)
            number = c1.text_input("Número / nome", key="new_pond_number")
            size = c2.number_input("Área", min_value=0.0, value=1.0, step=0.1, key="new_pond_size")
            uom = c3.selectbox("Unidade", list(AreaUnit), format_func=lambda u: UOM_PT[u])
            c4, c5 = st.columns(2)
            feeding_type = c4.text_input("Tipo de ração")
            status = c5.selectbox("Situação", list(PondStatus), format_func=lambda s: STATUS_PT[s])
            if st.form_submit_button("Salvar viveiro"):
                try:
                    pond = RegisterPondUseCase(pond_repo).execute(number, size, uom, feeding_type, status)
                except ValueError as e:
                    st.error(str(e))
                else:
                    st.toast(f"{pond.pond_number} cadastrado.")
                    st.rerun()

    if not ponds:
        st.info("Nenhum viveiro cadastrado.")
        return

    pond_map = {p.id: p for p in ponds}
    seeded = st.session_state.get("param_pond_id")
    ids = list(pond_map.keys())
    idx = ids.index(seeded) if seeded in pond_map else 0
    pond_id = st.selectbox("Viveiro", ids, index=idx, format_func=lambda i: pond_map[i].pond_number)
    st.session_state["param_pond_id"] = pond_id
    pond = pond_map[pond_id]

    with st.form("intake", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        feed = c1.number_input("Ração ofertada (kg)", min_value=0.0, value=0.0, step=0.5)
        consumed = c2.number_input("Ração consumida (kg)", min_value=0.0, value=0.0, step=0.5)
        when = c3.date_input("Data", value=date.today())
        notes = st.text_input("Observações")
        if st.form_submit_button("Registrar consumo"):
            try:
                rec = RecordFeedIntakeUseCase(pond_repo, intake_repo).execute(pond_id, feed, consumed, notes, when)
                st.success(f"Consumo registrado: {fmt_num(rec.consumption_rate_pct, 1)}%")
            except ValueError as e:
                st.error(str(e))

    summary = GenerateAnalyticsUseCase(pond_repo, intake_repo).execute(pond_id).summary
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Registros", summary["count"])
    c2.metric("Ofertado (kg)", fmt_num(summary["total_feed_kg"]))
    c3.metric("Consumido (kg)", fmt_num(summary["total_consumed_kg"]))
    avg = summary["avg_consumption_rate"]
    c4.metric("Consumo médio", f"{fmt_num(avg, 1)}%" if avg is not None else "—")

    records = intake_repo.list_for_pond(pond_id)
    if records:
        for r in records:
            color = BAND_COLORS[r.consumption_band()]
            st.markdown(f"""
            <div class="card pond-top">
              <div>
                <div class="pond-name">{r.date.strftime('%d/%m/%Y')}</div>
                <div class="pond-meta">Ofertado {fmt_num(r.feed_amount_kg)} kg · consumido {fmt_num(r.consumed_kg)} kg
                  {(' · ' + r.notes) if r.notes else ''}</div>
              </div>
              <div>{badge(fmt_num(r.consumption_rate_pct, 1) + '%', color)}</div>
            </div>
            """, unsafe_allow_html=True)
    else:
        st.caption("Sem registros de consumo para este viveiro.")

    if st.button(f"Remover {pond.pond_number}", type="secondary"):
        removed = DeletePondUseCase(pond_repo).execute(pond_id)
        st.session_state.pop("param_pond_id", None)
        st.toast(f"{pond.pond_number} removido ({removed} registros de consumo).")
        st.rerun()

# =============================================================================
# TRATO
# =============================================================================
def biomass_curve(pond_size_ha: float, stocking_density: float, max_age: int = 150) -> pd.DataFrame:
    ages = np.arange(0, max_age + 1)
    biomass = [estimate_biomass_kg(int(a), pond_size_ha, stocking_density) for a in ages]
    return pd.DataFrame({"idade": ages, "biomassa_kg": biomass})

def page_feeding(weather: WeatherReading):
    ponds = [p for p in pond_repo.list_all() if p.is_active]
    if not ponds:
        st.info("Nenhum viveiro ativo.")
        return

    pond_map = {p.id: p for p in ponds}
    c1, c2, c3 = st.columns(3)
    pond_id = c1.selectbox("Viveiro", list(pond_map.keys()), format_func=lambda i: pond_map[i].pond_number)
    age = c2.number_input("Idade (dias)", min_value=0, value=DEFAULT_PRAWN_AGE_DAYS, step=1)
    density = c3.number_input("Densidade de estocagem", min_value=1, value=DEFAULT_STOCKING_DENSITY, step=1000)

    try:
        plan = PlanFeedingUseCase(pond_repo).execute(pond_id, float(age), float(density), weather)
    except ValueError as e:
        st.error(str(e))
        return

    s = plan.schedule
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Ração diária (kg)", fmt_num(s.daily_amount_kg))
    m2.metric("Por trato (kg)", fmt_num(s.amount_per_feeding_kg))
    m3.metric("Proteína", f"{fmt_num(s.protein_content_pct, 0)}%")
    m4.metric("Biomassa (kg)", fmt_num(plan.biomass_kg))
    st.markdown(f"""
    <div class="card">
      <div class="pond-name">{s.feed_type} · {fmt_num(s.feed_size_mm, 1)} mm</div>
      <div class="pond-meta">Horários: {', '.join(s.feeding_times)}</div>
      <div class="pond-meta">Aplicação: {s.application_method}</div>
      <div class="rec" style="margin-top:6px;">{plan.weather_advice or ''}</div>
    </div>
    """, unsafe_allow_html=True)

    pond = pond_map[pond_id]
    df = biomass_curve(pond.size_ha, float(density))
    fig = go.Figure(go.Scatter(
        x=df["idade"], y=df["biomassa_kg"], mode="lines", line=dict(width=2),
        hovertemplate="Dia %{x}<br>Biomassa: %{y:,.0f} kg<extra></extra>",
    ))
    fig.add_vline(x=int(age), line_dash="dot", line_color="#22d3ee")
    fig.update_layout(
        paper_bgcolor='rgba(0,0,0,0)', plot_bgcolor='rgba(0,0,0,0)', font=dict(color='#cbd5e1'),
        xaxis=dict(title="Dias de cultivo", gridcolor='rgba(34,211,238,.08)'),
        yaxis=dict(title="Biomassa estimada (kg)", gridcolor='rgba(34,211,238,.08)'),
        margin=dict(l=6, r=6, t=6, b=6), height=280,
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    page_feeding_log(pond, s.feed_type, s.feeding_times[0] if s.feeding_times else "")

def page_feeding_log(pond, default_feed_type: str, default_time: str):
    st.markdown("#### Caderno de trato")
    uc = FeedingLogUseCase(record_repo)

    with st.form("feeding_log", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        feed_type = c1.text_input("Ração", value=default_feed_type)
        amount = c2.number_input("Quantidade (kg)", min_value=0.0, value=0.0, step=0.5)
        feeding_time = c3.text_input("Horário", value=default_time)
        notes = st.text_input("Observações", key="log_notes")
        if st.form_submit_button("Lançar trato"):
            try:
                uc.add(PondFeedingRecord(
                    pond_name=pond.pond_number, pond_size=pond.size_ha, feed_type=feed_type,
                    feed_amount=float(amount), feeding_time=feeding_time, notes=notes,
                ))
                st.success("Trato lançado.")
            except ValueError as e:
                st.error(str(e))

    records = uc.list_records()
    if not records:
        st.caption("Nenhum trato lançado.")
        return

    df = pd.DataFrame([r.to_dict() for r in records])
    st.dataframe(
        df[["date", "pondName", "feedType", "feedAmount", "feedingTime", "notes"]].rename(columns={
            "date": "Data", "pondName": "Viveiro", "feedType": "Ração",
            "feedAmount": "Qtd (kg)", "feedingTime": "Horário", "notes": "Obs.",
        }),
        use_container_width=True, hide_index=True,
    )

    export = uc.export_json()
    c1, c2, c3 = st.columns(3)
    c1.download_button("Exportar JSON", data=export.content, file_name=export.filename,
                       mime="application/json", use_container_width=True)
    to_delete = c2.selectbox("Apagar registro", [r.id for r in records],
                             format_func=lambda i: next(f"{r.date:%d/%m} {r.pond_name} {r.feed_amount} kg"
                                                        for r in records if r.id == i),
                             label_visibility="collapsed")
    if c2.button("Apagar", use_container_width=True):
        uc.delete(to_delete)
        st.rerun()
    if c3.button("Limpar tudo", use_container_width=True):
        uc.clear()
        st.rerun()

# =============================================================================
# CLIMA
# =============================================================================
def page_weather(source: Optional[str]):
    report = MonitorWeatherUseCase(lambda: get_weather()[0]).execute()
    w = report.weather
    c1, c2, c3 = st.columns(3)
    c1.metric("Temperatura", f"{fmt_num(w.temperature_c, 0)} °C")
    c2.metric("Umidade", f"{fmt_num(w.humidity_pct, 0)}%")
    c3.metric("Chuva", f"{fmt_num(w.rainfall_mm, 0)} mm")
    st.caption(f"{OPENWEATHER_CITY} · origem: {source or '—'}")

    if report.has_high_severity:
        st.warning("Há alertas de clima que pedem ação imediata.")
    st.info(report.feeding_advice)

    for c in report.care:
        actions = "".join(f'<div class="rec">• {a}</div>' for a in c.actions)
        st.markdown(f"""
        <div class="card">
          <div class="pond-top">
            <div class="pond-name">{c.title}</div>
            <div>{badge(c.severity.value.upper(), SEVERITY_COLORS[c.severity])}</div>
          </div>
          <div class="pond-meta" style="margin:4px 0;">{c.description}</div>
          {actions}
        </div>
        """, unsafe_allow_html=True)

# =============================================================================
# SIDEBAR
# =============================================================================
run_migrations()
load_base_css()

st.sidebar.header("Controles")
if st.sidebar.button("Atualizar clima", use_container_width=True):
    get_weather.clear()
    st.rerun()

weather, weather_source = get_weather()
st.sidebar.caption(
    f"Clima: {fmt_num(weather.temperature_c, 0)} °C · {fmt_num(weather.humidity_pct, 0)}% · "
    f"{fmt_num(weather.rainfall_mm, 0)} mm ({weather_source or '—'})"
)

# =============================================================================
# DISPATCHER
# =============================================================================
route = st.session_state.route
if route == "pond":
    page_pond(); bottom_nav(route); st.stop()
elif route == "feeding":
    page_feeding(weather); bottom_nav(route); st.stop()
elif route == "weather":
    page_weather(weather_source); bottom_nav(route); st.stop()
else:
    page_home(weather); bottom_nav(route); st.stop()
