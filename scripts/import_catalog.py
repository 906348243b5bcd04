#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
import_catalog.py

Cadastra cursos, professores e salas na API a partir de planilha.

Fonte (SOURCE_PATH):
  - uma pasta com courses.csv, faculty.csv e rooms.csv
  - ou um .xlsx com abas "courses", "faculty" e "rooms"

Colunas esperadas (cabeçalho na linha 1, maiúsculas/minúsculas tanto faz):
  courses: name, code, enrollment, duration_hours, description
  faculty: name, email, department, specializations ("ML, Algebra")
  rooms:   name, capacity, building, floor, has_projector, has_computers

ENV obrigatórias:
  API_BASE_URL=http://127.0.0.1:8000
  SOURCE_PATH=data/catalog.xlsx

ENV opcionais:
  GENERATE=1          (no fim chama POST /timetable/generate)
  REQUEST_TIMEOUT=30  (segundos)
"""

from __future__ import annotations

import csv
import json
import os
from typing import Any, Dict, List, Tuple

import openpyxl
import requests
from dotenv import load_dotenv

SHEETS = ("courses", "faculty", "rooms")


# ----------------------------
# Helpers
# ----------------------------

def die(msg: str, code: int = 1) -> None:
    print(f"[ERRO] {msg}")
    raise SystemExit(code)


def env_required(name: str) -> str:
    v = os.getenv(name)
    if not v:
        die(f"Variável de ambiente obrigatória não definida: {name}")
    return v


def norm(s: Any) -> str:
    return ("" if s is None else str(s)).strip()


def parse_bool(value: Any) -> bool:
    return norm(value).lower() in {"sim", "true", "1", "yes", "y", "x"}


def parse_int(value: Any) -> int | None:
    s = norm(value)
    if not s:
        return None
    try:
        return int(float(s))
    except ValueError:
        return None


# ----------------------------
# Leitura (CSV ou XLSX)
# ----------------------------

def read_csv_rows(path: str) -> List[Dict[str, Any]]:
    if not os.path.exists(path):
        print(f"Arquivo não encontrado, pulando: {path}")
        return []
    # utf-8-sig remove BOM
    with open(path, newline="", encoding="utf-8-sig") as f:
        return [{k.strip().lower(): v for k, v in row.items() if k} for row in csv.DictReader(f)]


def read_xlsx_rows(xlsx_path: str) -> Dict[str, List[Dict[str, Any]]]:
    wb = openpyxl.load_workbook(xlsx_path, data_only=True)
    out: Dict[str, List[Dict[str, Any]]] = {}

    for sheet_name in SHEETS:
        if sheet_name not in wb.sheetnames:
            print(f"Aba '{sheet_name}' não encontrada, pulando. Abas: {wb.sheetnames}")
            out[sheet_name] = []
            continue

        ws = wb[sheet_name]
        headers: Dict[int, str] = {}
        for col in range(1, ws.max_column + 1):
            v = ws.cell(row=1, column=col).value
            if v is not None:
                headers[col] = str(v).strip().lower()

        rows = []
        for row in range(2, ws.max_row + 1):
            item = {name: ws.cell(row=row, column=col).value for col, name in headers.items()}
            if any(norm(v) for v in item.values()):
                rows.append(item)
        out[sheet_name] = rows

    return out


def read_source(source_path: str) -> Dict[str, List[Dict[str, Any]]]:
    if source_path.lower().endswith(".xlsx"):
        return read_xlsx_rows(source_path)
    if os.path.isdir(source_path):
        return {name: read_csv_rows(os.path.join(source_path, f"{name}.csv")) for name in SHEETS}
    die(f"SOURCE_PATH deve ser uma pasta com CSVs ou um .xlsx: {source_path}")
    return {}


# ----------------------------
# Linha -> payload da API
# ----------------------------

def course_payload(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": norm(row.get("name")),
        "code": norm(row.get("code")),
        "enrollment": parse_int(row.get("enrollment")),
        "duration_hours": parse_int(row.get("duration_hours")) or 1,
        "description": norm(row.get("description")) or None,
    }


def faculty_payload(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": norm(row.get("name")),
        "email": norm(row.get("email")),
        "department": norm(row.get("department")) or None,
        # a API aceita texto separado por vírgula
        "specializations": norm(row.get("specializations")),
    }


def room_payload(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": norm(row.get("name")),
        "capacity": parse_int(row.get("capacity")),
        "building": norm(row.get("building")) or None,
        "floor": parse_int(row.get("floor")),
        "has_projector": parse_bool(row.get("has_projector")),
        "has_computers": parse_bool(row.get("has_computers")),
    }


PAYLOAD_BUILDERS = {
    "courses": course_payload,
    "faculty": faculty_payload,
    "rooms": room_payload,
}


# ----------------------------
# API
# ----------------------------

def post_record(api_base_url: str, resource: str, payload: Dict[str, Any], timeout: int) -> Tuple[int, Any]:
    url = api_base_url.rstrip("/") + f"/{resource}"
    resp = requests.post(url, json=payload, headers={"accept": "application/json"}, timeout=timeout)
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    return resp.status_code, body


def import_resource(api_base_url: str, resource: str, rows: List[Dict[str, Any]], timeout: int) -> Tuple[int, int]:
    build = PAYLOAD_BUILDERS[resource]
    ok = failed = 0

    for i, row in enumerate(rows, start=2):
        status_code, body = post_record(api_base_url, resource, build(row), timeout)
        if status_code == 201:
            ok += 1
            continue
        # não mata o processo: reporta a linha e segue
        failed += 1
        print(f"[{resource}] linha {i} recusada (status {status_code}):")
        print(json.dumps(body, ensure_ascii=False, indent=2) if isinstance(body, (dict, list)) else body)

    print(f"[{resource}] {ok} cadastrado(s), {failed} com erro.")
    return ok, failed


def trigger_generation(api_base_url: str, timeout: int) -> None:
    url = api_base_url.rstrip("/") + "/timetable/generate"
    resp = requests.post(url, headers={"accept": "application/json"}, timeout=timeout)

    if resp.status_code == 409:
        die("Já existe uma geração em andamento. Tente de novo em instantes.", 2)
    if resp.status_code != 200:
        die(f"Falha ao gerar horário. Status {resp.status_code}: {resp.text}", 2)

    body = resp.json()
    print("Geração:", body.get("status"), "| entries:", len(body.get("entries", [])))
    for note in body.get("notifications", []):
        print(f"  - [{note.get('level')}] {note.get('message')}")


# ----------------------------
# Main
# ----------------------------

def main() -> None:
    load_dotenv()

    api_base_url = env_required("API_BASE_URL")
    source_path = env_required("SOURCE_PATH")
    timeout = int(os.getenv("REQUEST_TIMEOUT", "30"))

    data = read_source(source_path)
    total_failed = 0
    for resource in SHEETS:
        rows = data.get(resource, [])
        print(f"-> {resource}: {len(rows)} linha(s)")
        _, failed = import_resource(api_base_url, resource, rows, timeout)
        total_failed += failed

    if parse_bool(os.getenv("GENERATE")):
        trigger_generation(api_base_url, timeout)

    if total_failed:
        die(f"{total_failed} linha(s) não foram importadas. Veja o output acima.", 2)

    print("✅ Importação concluída com sucesso.")


if __name__ == "__main__":
    main()
