"""
Fixed SQL templates, one per endpoint.

Views are referenced without a project/dataset prefix: the warehouse client
runs every job with the configured dataset as its default dataset.
User input only ever reaches these statements through @named parameters.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict


class QueryTemplate(BaseModel):
    name: str
    label: str  # short name used in logs and error messages
    sql: str

    model_config = ConfigDict(frozen=True)


# =========================
# SEATS
# =========================
SEAT_USAGE = QueryTemplate(
    name="seat_usage",
    label="seat usage",
    sql="""
    SELECT
      shop_name,
      seat_id,
      use_flg,
      usedate
    FROM
      `vw_seat_usage_merged`
    WHERE
      TRIM(shop_name) = TRIM(@shop_name)
      AND DATE(usedate) BETWEEN CAST(@start AS DATE) AND CAST(@end AS DATE)
    ORDER BY usedate, seat_id
    """,
)


# =========================
# ELECTRICITY
# =========================
ELECTRICITY_SUMMARY = QueryTemplate(
    name="electricity_summary",
    label="electricity",
    sql="""
    SELECT
      floor,
      AVG(power_kwh) AS kwh_avg,
      SUM(power_kwh) AS kwh_sum
    FROM
      `v_electricity_L_T_1to9F_long`
    WHERE
      floor BETWEEN @floor_min AND @floor_max
      AND TIMESTAMP(datetime) BETWEEN TIMESTAMP(@start) AND TIMESTAMP(@end)
    GROUP BY floor
    ORDER BY floor
    """,
)

ELECTRICITY_TIMESLOT = QueryTemplate(
    name="electricity_timeslot",
    label="timeslot",
    sql="""
    SELECT
      time_slot,
      kwh_avg
    FROM
      `vw_electricity_timeslot`
    WHERE
      floor = @floor
    ORDER BY time_slot
    """,
)

ELECTRICITY_HOURLY = QueryTemplate(
    name="electricity_hourly",
    label="hourly",
    sql="""
    SELECT
      floor,
      EXTRACT(HOUR FROM datetime) AS hour,
      AVG(power_kwh) AS kwh_avg
    FROM
      `v_electricity_L_T_1to9F_long`
    WHERE
      floor BETWEEN @floor_min AND @floor_max
      AND datetime BETWEEN TIMESTAMP(@start) AND TIMESTAMP(@end)
    GROUP BY floor, hour
    ORDER BY floor, hour
    """,
)

ELECTRICITY_DAILY = QueryTemplate(
    name="electricity_daily",
    label="daily",
    sql="""
    SELECT
      DATE(datetime) AS date,
      floor,
      SUM(power_kwh) AS kwh_sum,
      AVG(power_kwh) AS kwh_avg
    FROM
      `v_electricity_L_T_1to9F_long`
    WHERE
      floor BETWEEN @floor_min AND @floor_max
      AND datetime BETWEEN TIMESTAMP(@start) AND TIMESTAMP(@end)
    GROUP BY date, floor
    ORDER BY date, floor
    """,
)


# =========================
# MAINTENANCE WORK
# =========================
WORK_YEAR_CATEGORY = QueryTemplate(
    name="work_year_category",
    label="year-category",
    sql="""
    SELECT * FROM `v_year_category_cost`
    ORDER BY year, category
    """,
)

WORK_FLOOR_COUNT = QueryTemplate(
    name="work_floor_count",
    label="floor-count",
    sql="""
    SELECT * FROM `v_floor_count`
    ORDER BY floor
    """,
)

WORK_PART_AVG = QueryTemplate(
    name="work_part_avg",
    label="part-avg",
    sql="""
    SELECT * FROM `v_part_avg_cost`
    ORDER BY total_cost DESC
    """,
)

WORK_YEAR_FLOOR = QueryTemplate(
    name="work_year_floor",
    label="year-floor",
    sql="""
    SELECT * FROM `v_year_floor_cost`
    ORDER BY year, floor
    """,
)

_WORK_DETAIL_SELECT = """
    SELECT
      _property_id_,
      property_name,
      year,
      category,
      part,
      detail,
      work_name,
      work_detail,
      reason,
      approval_note,
      contractor,
      responsible_person,
      cost_ex_tax,
      completion_date,
      status,
      b1f,
      `1f`, `2f`, `3f`, `4f`, `5f`, `6f`, `7f`, `8f`, `9f`, `10f`,
      rf
    FROM `v_work_detail`
"""

WORK_DETAIL = QueryTemplate(
    name="work_detail",
    label="work/detail",
    sql=_WORK_DETAIL_SELECT,
)

WORK_DETAIL_BY_YEAR = QueryTemplate(
    name="work_detail_by_year",
    label="work/detail",
    sql=_WORK_DETAIL_SELECT + "    WHERE CAST(year AS INT64) = @year\n",
)


TEMPLATES: Dict[str, QueryTemplate] = {
    template.name: template
    for template in (
        SEAT_USAGE,
        ELECTRICITY_SUMMARY,
        ELECTRICITY_TIMESLOT,
        ELECTRICITY_HOURLY,
        ELECTRICITY_DAILY,
        WORK_YEAR_CATEGORY,
        WORK_FLOOR_COUNT,
        WORK_PART_AVG,
        WORK_YEAR_FLOOR,
        WORK_DETAIL,
        WORK_DETAIL_BY_YEAR,
    )
}


def get_template(name: str) -> QueryTemplate:
    try:
        return TEMPLATES[name]
    except KeyError:
        raise KeyError(f"Unknown query template: {name}") from None
