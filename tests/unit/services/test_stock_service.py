# tests/unit/services/test_stock_service.py
import pytest

from inventory_api.core.enums import MovementType, StockStatus
from inventory_api.core.exceptions import (
    ConflictError,
    NotFoundError,
    StockNotFoundError,
    ValidationError
)
from inventory_api.schemas.stock import StockRead
from inventory_api.services.stock_service import StockService


# --- Tests for create_stock ---

def test_create_stock_without_quantity_is_out_of_stock(stock_service):
    view = stock_service.create_stock(1)

    assert isinstance(view, StockRead)
    assert view.product_id == 1
    assert view.quantity == 0
    assert view.status == StockStatus.OUT_OF_STOCK
    assert stock_service.get_stock_movements(1) == []

def test_create_stock_with_initial_quantity_records_entry(stock_service):
    view = stock_service.create_stock(1, 5)

    movements = stock_service.get_stock_movements(1)

    assert view.quantity == 5
    assert view.status == StockStatus.LOW
    assert len(movements) == 1
    assert movements[0].type == MovementType.ENTRADA
    assert movements[0].reason == "Initial stock"
    assert (movements[0].previous_quantity, movements[0].new_quantity) == (0, 5)

def test_create_stock_twice_raises_conflict(stock_service):
    stock_service.create_stock(1, 3)

    with pytest.raises(ConflictError, match="already has a stock record"):
        stock_service.create_stock(1, 8)

    assert stock_service.get_stock(1).quantity == 3

def test_create_stock_rejects_negative_quantity(stock_service):
    with pytest.raises(ValidationError, match="cannot be negative"):
        stock_service.create_stock(1, -1)

    with pytest.raises(StockNotFoundError):
        stock_service.get_stock(1)

def test_create_stock_does_not_require_an_existing_product(stock_service):
    """Stock references products by id only."""
    assert stock_service.create_stock(999, 1).product_id == 999


# --- Tests for update_stock ---

@pytest.mark.parametrize(
    "movement_type, start, quantity, expected",
    [
        pytest.param(MovementType.ENTRADA, 5, 3, 8, id="entrada_adds"),
        pytest.param(MovementType.DEVOLUCION, 5, 2, 7, id="devolucion_adds"),
        pytest.param(MovementType.SALIDA, 5, 5, 0, id="salida_subtracts_to_zero"),
        pytest.param(MovementType.AJUSTE, 5, 40, 40, id="ajuste_replaces"),
        pytest.param(MovementType.AJUSTE, 50, 1, 1, id="ajuste_replaces_downwards"),
    ],
)
def test_update_stock_applies_movement_rule(stock_service, movement_type, start, quantity, expected):
    stock_service.create_stock(1, start)

    view = stock_service.update_stock(1, quantity, movement_type=movement_type)
    movement = stock_service.get_stock_movements(1)[-1]

    assert view.quantity == expected
    assert movement.type == movement_type
    assert movement.quantity == quantity
    assert movement.previous_quantity == start
    assert movement.new_quantity == expected == stock_service.get_stock(1).quantity

def test_update_stock_accepts_movement_type_values(stock_service):
    stock_service.create_stock(1, 1)

    assert stock_service.update_stock(1, 4, movement_type="devolución").quantity == 5

def test_update_stock_defaults_to_ajuste(stock_service):
    stock_service.create_stock(1, 30)

    view = stock_service.update_stock(1, 12)

    assert view.quantity == 12
    assert stock_service.get_stock_movements(1)[-1].type == MovementType.AJUSTE

def test_update_stock_default_reason_names_the_type(stock_service):
    stock_service.create_stock(1, 10)

    stock_service.update_stock(1, 2, movement_type=MovementType.SALIDA)
    stock_service.update_stock(1, 2, "", MovementType.ENTRADA)
    stock_service.update_stock(1, 1, "Damaged box", MovementType.SALIDA)

    reasons = [m.reason for m in stock_service.get_stock_movements(1)]
    assert reasons == ["Initial stock", "Movement of salida", "Movement of entrada", "Damaged box"]

def test_salida_with_insufficient_stock_leaves_stock_unchanged(stock_service):
    stock_service.create_stock(1, 2)
    before = stock_service.get_stock(1)

    with pytest.raises(ValidationError, match="Insufficient stock"):
        stock_service.update_stock(1, 3, movement_type=MovementType.SALIDA)

    after = stock_service.get_stock(1)
    assert after.quantity == 2
    assert after.last_updated == before.last_updated
    assert len(stock_service.get_stock_movements(1)) == 1

@pytest.mark.parametrize("movement_type", list(MovementType))
@pytest.mark.parametrize("quantity", [0, -4])
def test_update_stock_rejects_non_positive_quantity(stock_service, movement_type, quantity):
    """Even ajuste cannot set the stock to zero."""
    stock_service.create_stock(1, 5)

    with pytest.raises(ValidationError, match="greater than zero"):
        stock_service.update_stock(1, quantity, movement_type=movement_type)

    assert stock_service.get_stock(1).quantity == 5

def test_update_stock_rejects_unknown_movement_type(stock_service):
    stock_service.create_stock(1, 5)

    with pytest.raises(ValidationError, match="Invalid movement type"):
        stock_service.update_stock(1, 1, movement_type="robo")

def test_update_stock_missing_record_raises_not_found(stock_service):
    with pytest.raises(NotFoundError, match="No stock found for product 3"):
        stock_service.update_stock(3, 1, movement_type=MovementType.ENTRADA)

def test_update_stock_refreshes_last_updated(stock_service):
    created = stock_service.create_stock(1, 5)

    updated = stock_service.update_stock(1, 1, movement_type=MovementType.ENTRADA)

    assert updated.last_updated > created.last_updated
    assert stock_service.get_stock_movements(1)[-1].timestamp == updated.last_updated

def test_sell_and_add_shorthands(stock_service):
    stock_service.create_stock(1, 20)

    assert stock_service.sell_product(1, 5).quantity == 15
    assert stock_service.add_stock(1, 10, "Supplier delivery").quantity == 25

    types = [(m.type, m.reason) for m in stock_service.get_stock_movements(1)[1:]]
    assert types == [
        (MovementType.SALIDA, "Movement of salida"),
        (MovementType.ENTRADA, "Supplier delivery"),
    ]


# --- Tests for the widget scenario ---

def test_widget_sale_scenario(stock_service):
    """
    Stock of 5 is low; selling 3 leaves 2 (still low); selling 10 more fails.
    """
    assert stock_service.create_stock(1, 5).status == StockStatus.LOW

    view = stock_service.update_stock(1, 3, movement_type=MovementType.SALIDA)
    assert (view.quantity, view.status) == (2, StockStatus.LOW)

    with pytest.raises(ValidationError, match="Insufficient stock"):
        stock_service.update_stock(1, 10, movement_type=MovementType.SALIDA)
    assert stock_service.get_stock(1).quantity == 2


# --- Tests for status derivation and listings ---

@pytest.mark.parametrize(
    "quantity, expected",
    [
        pytest.param(0, StockStatus.OUT_OF_STOCK, id="zero"),
        pytest.param(1, StockStatus.LOW, id="one"),
        pytest.param(10, StockStatus.LOW, id="at_threshold"),
        pytest.param(11, StockStatus.AVAILABLE, id="above_threshold"),
    ],
)
def test_status_is_derived_from_threshold(stock_service, quantity, expected):
    assert stock_service.create_stock(1, quantity).status == expected

def test_status_is_recomputed_on_every_read(stock_service):
    stock_service.create_stock(1, 11)
    assert stock_service.get_stock(1).status == StockStatus.AVAILABLE

    stock_service.sell_product(1, 11)

    assert stock_service.get_stock(1).status == StockStatus.OUT_OF_STOCK

def test_custom_min_threshold():
    stock_service = StockService(min_threshold=3)
    stock_service.create_stock(1, 3)
    stock_service.create_stock(2, 4)

    assert [s.product_id for s in stock_service.get_low_stock_products()] == [1]
    assert stock_service.get_stock(2).status == StockStatus.AVAILABLE

def test_low_stock_excludes_empty_and_available(stock_service):
    stock_service.create_stock(1, 0)
    stock_service.create_stock(2, 4)
    stock_service.create_stock(3, 50)
    stock_service.create_stock(4, 10)

    low = stock_service.get_low_stock_products()

    assert [s.product_id for s in low] == [2, 4]
    assert all(s.status == StockStatus.LOW for s in low)

def test_get_all_stocks_in_insertion_order(stock_service):
    for product_id in (3, 1, 2):
        stock_service.create_stock(product_id)

    assert [s.product_id for s in stock_service.get_all_stocks()] == [3, 1, 2]

def test_reads_do_not_mutate(stock_service):
    stock_service.create_stock(1, 5)

    first = stock_service.get_stock(1)
    stock_service.get_all_stocks()
    stock_service.get_low_stock_products()
    stock_service.get_stock_movements(1)

    assert stock_service.get_stock(1) == first

def test_movement_history_cannot_be_changed_by_callers(stock_service):
    stock_service.create_stock(1, 5)

    history = stock_service.get_stock_movements(1)
    history.clear()

    assert len(stock_service.get_stock_movements(1)) == 1

def test_get_stock_movements_missing_record(stock_service):
    with pytest.raises(StockNotFoundError):
        stock_service.get_stock_movements(1)


# --- Tests for delete_stock ---

def test_delete_stock(stock_service):
    stock_service.create_stock(1, 5)

    assert stock_service.delete_stock(1) is None

    with pytest.raises(StockNotFoundError):
        stock_service.get_stock(1)
    with pytest.raises(StockNotFoundError):
        stock_service.delete_stock(1)

def test_stock_can_be_recreated_after_delete(stock_service):
    stock_service.create_stock(1, 5)
    stock_service.delete_stock(1)

    assert stock_service.create_stock(1, 2).quantity == 2
