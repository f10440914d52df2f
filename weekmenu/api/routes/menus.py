from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from weekmenu.api.deps import get_current_user, get_optional_user, get_menu_service
from weekmenu.domain.Menu import Menu
from weekmenu.domain.User import User
from weekmenu.infra.pdf_utils import generate_shopping_list_pdf
from weekmenu.logic.services.menu_service import MenuService
from weekmenu.utilities.validators import MenuInput, MenuUpdateInput

router = APIRouter(prefix="/api/menus", tags=["menus"])


def serialize_menu(menu: Menu) -> dict:
    data = menu.to_dict()
    data.pop("active", None)
    return data


@router.get("")
def list_menus(created_by: Optional[str] = Query(default=None, alias="createdBy"),
               week: Optional[str] = Query(default=None),
               user: User = Depends(get_current_user),
               service: MenuService = Depends(get_menu_service)):
    menus = service.list(user, created_by=created_by, week=week)
    return {"status": "success", "results": len(menus), "data": [serialize_menu(m) for m in menus]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_menu(payload: MenuInput,
                user: Optional[User] = Depends(get_optional_user),
                service: MenuService = Depends(get_menu_service)):
    menu = service.create(user, payload)
    return {"status": "success", "data": serialize_menu(menu)}


@router.get("/{menu_id}/shopping-list")
def menu_shopping_list(menu_id: str,
                       people: Optional[int] = Query(default=None),
                       user: User = Depends(get_current_user),
                       service: MenuService = Depends(get_menu_service)):
    result = service.shopping_list(user, menu_id, people)
    return {"status": "success", "data": {"shoppingList": result["shoppingList"], "forPeople": result["forPeople"]}}


@router.get("/{menu_id}/shopping-list.pdf")
def menu_shopping_list_pdf(menu_id: str,
                           people: Optional[int] = Query(default=None),
                           user: User = Depends(get_current_user),
                           service: MenuService = Depends(get_menu_service)):
    result = service.shopping_list(user, menu_id, people)
    pdf_bytes = generate_shopping_list_pdf(result["menu"], result["shoppingList"], result["forPeople"])
    filename = f"shopping_list_{result['menu'].week}.pdf"
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f"attachment; filename={filename}"})


@router.get("/{week}")
def get_menu_by_week(week: str,
                     user: User = Depends(get_current_user),
                     service: MenuService = Depends(get_menu_service)):
    result = service.get_by_week(user, week)
    return {"status": "success", "data": {**result, "menu": serialize_menu(result["menu"])}}


@router.patch("/{menu_id}")
def update_menu(menu_id: str, payload: MenuUpdateInput,
                user: Optional[User] = Depends(get_optional_user),
                service: MenuService = Depends(get_menu_service)):
    menu = service.update(user, menu_id, payload)
    return {"status": "success", "data": serialize_menu(menu)}


@router.delete("/{menu_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_menu(menu_id: str,
                user: Optional[User] = Depends(get_optional_user),
                service: MenuService = Depends(get_menu_service)):
    service.delete(user, menu_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
