from collections import Counter

from cardduel.core.rng import RNG
from cardduel.domain.deck import DeckState
from cardduel.domain.defs import CardDef, EffectKind


def _card(card_id: str) -> CardDef:
    return CardDef(id=card_id, title=card_id.title(), cost=1, effect=EffectKind.DAMAGE, value=1)


def test_from_cards_shuffles_into_draw_pile() -> None:
    cards = [_card(f"c{i}") for i in range(6)]

    deck_a = DeckState.from_cards(cards, hand_size=3, rng=RNG(4))
    deck_b = DeckState.from_cards(cards, hand_size=3, rng=RNG(4))

    assert deck_a.draw_pile == deck_b.draw_pile
    assert Counter(deck_a.draw_pile) == Counter(cards)
    assert deck_a.hand == []
    assert deck_a.discard_pile == []


def test_draw_takes_from_top_of_pile() -> None:
    a, b, c = _card("a"), _card("b"), _card("c")
    deck = DeckState(hand_size=2, draw_pile=[a, b, c])

    result = deck.draw(2, RNG(1))

    assert result.drawn == [a, b]
    assert result.reshuffles == 0
    assert deck.hand == [a, b]
    assert deck.draw_pile == [c]


def test_draw_reshuffles_discard_when_pile_is_empty() -> None:
    discards = [_card(f"d{i}") for i in range(4)]
    deck = DeckState(hand_size=3, draw_pile=[], discard_pile=list(discards))

    result = deck.draw(2, RNG(9))

    assert result.reshuffles == 1
    assert len(deck.hand) == 2
    assert len(deck.draw_pile) == 2
    assert deck.discard_pile == []
    assert Counter(deck.hand + deck.draw_pile) == Counter(discards)


def test_draw_stops_silently_when_everything_is_empty() -> None:
    only = _card("only")
    deck = DeckState(hand_size=5, draw_pile=[only])

    result = deck.draw(5, RNG(2))

    assert result.drawn == [only]
    assert result.reshuffles == 0
    assert deck.hand == [only]


def test_draw_only_reshuffles_once_the_pile_runs_out() -> None:
    top, old = _card("top"), _card("old")
    deck = DeckState(hand_size=2, draw_pile=[top], discard_pile=[old])

    result = deck.draw(2, RNG(3))

    assert result.drawn == [top, old]
    assert result.reshuffles == 1
    assert deck.draw_pile == []
    assert deck.discard_pile == []


def test_discard_helpers_move_cards_without_losing_any() -> None:
    a, b, c = _card("a"), _card("b"), _card("c")
    deck = DeckState(hand_size=3, hand=[a, b, c])

    moved = deck.discard_from_hand(1)
    assert moved is b
    assert deck.hand == [a, c]
    assert deck.discard_pile == [b]

    deck.discard_hand()
    assert deck.hand == []
    assert deck.discard_pile == [b, a, c]
    assert Counter(deck.all_cards()) == Counter([a, b, c])


def test_index_in_hand_and_view() -> None:
    a, b = _card("a"), _card("b")
    deck = DeckState(hand_size=2, draw_pile=[b], hand=[a])

    assert deck.index_in_hand("a") == 0
    assert deck.index_in_hand("b") is None
    view = deck.view()
    assert view.hand == (a,)
    assert view.draw_pile == (b,)
    assert view.discard_pile == ()
