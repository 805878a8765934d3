# -*- coding: utf-8 -*-
"""
Парсер подмножества Wavefront OBJ: один объект, позиции, нормали,
texcoords и треугольные грани. Материалы и группы игнорируются.

parse_obj   – текст → RawObjData (раздельные индексы на каждый атрибут)
expand_obj  – RawObjData → Geometry («сварка» одинаковых углов)
load_obj*   – полный конвейер с канонизацией и синтезом атрибутов
"""
from pathlib import Path

import numpy as np

from meshkit.geometry import Geometry, ObjParseError, RawObjData
from meshkit.mesh.attributes import compute_normals, synthesize_attributes
from meshkit.mesh.canonicalize import canonicalize
from meshkit.utils.logger import logger
from meshkit.utils.profiler import Profiler

# комментарии обрабатываются отдельно (префикс '#')
IGNORED_TOKENS = {"mtllib", "usemtl", "g", "l", "s"}


def _parse_floats(tokens, count, lineno, kind):
    if len(tokens) < count:
        raise ObjParseError(
            f"Expected {count} values for \"{kind}\" on line {lineno}, got {len(tokens)}")
    try:
        return [float(t) for t in tokens[:count]]
    except ValueError as exc:
        raise ObjParseError(f"Malformed \"{kind}\" values on line {lineno}: {exc}") from exc


def _parse_index(token, pool_size, lineno, pool):
    """1‑based (или отрицательный, относительный) индекс → 0‑based."""
    try:
        idx = int(token)
    except ValueError as exc:
        raise ObjParseError(f"Malformed face index \"{token}\" on line {lineno}") from exc
    if idx == 0:
        raise ObjParseError(f"Face index 0 is invalid in OBJ (line {lineno})")
    resolved = idx - 1 if idx > 0 else pool_size + idx
    if not 0 <= resolved < pool_size:
        raise ObjParseError(
            f"Face references {pool} entry {idx} on line {lineno}, "
            f"but only {pool_size} are defined")
    return resolved


def _parse_corner(ref, sizes, lineno):
    # форматы: v, v/vt, v//vn, v/vt/vn
    parts = ref.split("/")
    if len(parts) > 3 or not parts[0]:
        raise ObjParseError(f"Malformed face reference \"{ref}\" on line {lineno}")
    position = _parse_index(parts[0], sizes[0], lineno, "positions")
    uv = (_parse_index(parts[1], sizes[1], lineno, "tex_coords")
          if len(parts) > 1 and parts[1] else position)
    normal = (_parse_index(parts[2], sizes[2], lineno, "normals")
              if len(parts) > 2 and parts[2] else position)
    return position, uv, normal


def parse_obj(text: str) -> RawObjData:
    """Разобрать OBJ‑текст в сырые пулы атрибутов и список углов граней."""
    name = None
    positions = []
    tex_coords = []
    normals = []
    corners = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens or tokens[0].startswith("#") or tokens[0] in IGNORED_TOKENS:
            continue
        kind, args = tokens[0], tokens[1:]
        if kind == "o":
            if name is not None:
                raise ObjParseError(f"Multiple object names defined in OBJ file (on line {lineno})")
            name = " ".join(args)
        elif kind == "v":
            positions.extend(_parse_floats(args, 3, lineno, kind))
        elif kind == "vn":
            normals.extend(_parse_floats(args, 3, lineno, kind))
        elif kind == "vt":
            # "vt u" допустим, v по‑умолчанию 0; w отбрасываем
            uv = _parse_floats(args, min(len(args), 2) or 1, lineno, kind)
            tex_coords.extend(uv if len(uv) == 2 else uv + [0.0])
        elif kind == "f":
            if len(args) != 3:
                raise ObjParseError(
                    f"Only triangulated faces are supported, got {len(args)} "
                    f"vertices on line {lineno}")
            sizes = (len(positions) // 3, len(tex_coords) // 2, len(normals) // 3)
            corners.extend(_parse_corner(ref, sizes, lineno) for ref in args)
        else:
            logger.warning(f"[ObjLoader] Unexpected OBJ token: \"{kind}\" on line {lineno}")

    if name is None:
        raise ObjParseError("No object name defined in OBJ file")

    if not normals:
        logger.info(f"[ObjLoader] Calculating normals for object \"{name}\"")
        normals = compute_normals(positions, [c[2] for c in corners]).tolist()
    if not tex_coords:
        logger.warning(f"[ObjLoader] No texture coordinates defined for object \"{name}\"")
        tex_coords = [0.0] * (len(positions) // 3 * 2)

    return RawObjData(
        name=name,
        positions=positions,
        tex_coords=tex_coords,
        normals=normals,
        corners=corners,
    )


def expand_obj(raw: RawObjData) -> Geometry:
    """
    Превратить раздельные индексы в один индекс на вершину.
    Углы с одинаковой тройкой (pos, uv, normal) становятся одной вершиной;
    порядок вершин – порядок первого появления. Тангенсы не заполняются.
    """
    known = {}
    unique = []
    indices = []
    for corner in raw.corners:
        index = known.get(corner)
        if index is None:
            index = len(unique)
            known[corner] = index
            unique.append(corner)
        indices.append(index)

    keys = np.asarray(unique, dtype=np.int64).reshape((-1, 3))
    pools = (
        ("positions", np.asarray(raw.positions, dtype=np.float32).reshape((-1, 3))),
        ("tex_coords", np.asarray(raw.tex_coords, dtype=np.float32).reshape((-1, 2))),
        ("normals", np.asarray(raw.normals, dtype=np.float32).reshape((-1, 3))),
    )
    attributes = {}
    for column, (attr, pool) in enumerate(pools):
        refs = keys[:, column]
        if refs.size and (refs.min() < 0 or refs.max() >= len(pool)):
            raise ObjParseError(
                f"Face references {attr} entry {int(refs.max()) + 1} of \"{raw.name}\", "
                f"but only {len(pool)} are defined")
        attributes[attr] = pool[refs].ravel()

    return Geometry(name=raw.name, indices=indices, **attributes)


def load_obj_text(text: str) -> Geometry:
    """Разбор, «сварка», канонизация и дополнение атрибутов."""
    with Profiler("parse_obj"):
        raw = parse_obj(text)
    with Profiler(f"expand_obj \"{raw.name}\""):
        geometry = expand_obj(raw)
    with Profiler(f"canonicalize \"{raw.name}\""):
        canonicalize(geometry)
    with Profiler(f"synthesize \"{raw.name}\""):
        synthesize_attributes(geometry)
    return geometry


def load_obj(path) -> Geometry:
    """Загрузить OBJ‑файл (UTF‑8) с диска."""
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"OBJ file not found: {p}")

    geometry = load_obj_text(p.read_text(encoding="utf-8"))
    logger.debug(f"[ObjLoader] Loaded {p} ({geometry.vertex_count} vertices, "
                 f"{geometry.face_count} faces)")
    return geometry
