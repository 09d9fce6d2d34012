"""/api/saved: saved parameter records."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_store
from app.models.requests import PatternRequest
from app.models.responses import ParamsOut, SavedParamsResponse
from app.storage.param_store import ParamStore

router = APIRouter()


def _response(store: ParamStore) -> SavedParamsResponse:
    saved = [ParamsOut(**p.to_dict()) for p in store.load_params()]
    return SavedParamsResponse(saved=saved, count=len(saved))


@router.get("/saved", response_model=SavedParamsResponse)
async def list_saved(store: ParamStore = Depends(get_store)) -> SavedParamsResponse:
    return _response(store)


@router.post("/saved", response_model=SavedParamsResponse)
async def save(req: PatternRequest, store: ParamStore = Depends(get_store)) -> SavedParamsResponse:
    store.save_params(req.to_params())
    return _response(store)


@router.delete("/saved", response_model=SavedParamsResponse)
async def clear(store: ParamStore = Depends(get_store)) -> SavedParamsResponse:
    store.clear_params()
    return _response(store)


@router.delete("/saved/{index}", response_model=SavedParamsResponse)
async def delete_one(index: int, store: ParamStore = Depends(get_store)) -> SavedParamsResponse:
    try:
        store.delete_params(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _response(store)
