import pytest
from hypothesis import given
from hypothesis import strategies as st

from bnposeidon.field import MODULUS
from bnposeidon.poseidon import (
    hash_no_pad,
    hash_or_noop,
    permute,
    to_vec,
    two_to_one,
)

P_MINUS_ONE = "21888242871839275222246405745257275088548364400416034343698204186575808495616"

PERMUTATION_CASES = [
    (
        ["0", "0", "0", "0"],
        [
            "5317387130258456662214331362918410991734007599705406860481038345552731150762",
            "17768273200467269691696191901389126520069745877826494955630904743826040320364",
            "19413739268543925182080121099097652227979760828059217876810647045303340666757",
            "3717738800218482999400886888123026296874264026760636028937972004600663725187",
        ],
    ),
    (
        ["0", "1", "2", "3"],
        [
            "6542985608222806190361240322586112750744169038454362455181422643027100751666",
            "3478427836468552423396868478117894008061261013954248157992395910462939736589",
            "1904980799580062506738911865015687096398867595589699208837816975692422464009",
            "11971464497515232077059236682405357499403220967704831154657374522418385384151",
        ],
    ),
    (
        [P_MINUS_ONE] * 4,
        [
            "13055670547682322550638362580666986963569035646873545133474324633020685301274",
            "19087936485076376314486368416882351797015004625427655501762827988254486144933",
            "10391468779200270580383536396630001155994223659670674913170907401637624483385",
            "17202557688472898583549180366140168198092766974201433936205272956998081177816",
        ],
    ),
    (
        [
            "6542985608222806190361240322586112750744169038454362455181422643027100751666",
            "3478427836468552423396868478117894008061261013954248157992395910462939736589",
            "1904980799580062506738911865015687096398867595589699208837816975692422464009",
            "11971464497515232077059236682405357499403220967704831154657374522418385384151",
        ],
        [
            "21792249080447013894140672594027696524030291802493510986509431008224624594361",
            "3536096706123550619294332177231935214243656967137545251021848527424156573335",
            "14869351042206255711434675256184369368509719143073814271302931417334356905217",
            "5027523131326906886284185656868809493297314443444919363729302983434650240523",
        ],
    ),
]


@pytest.mark.parametrize(("inputs", "expected"), PERMUTATION_CASES)
def test_permute_known_vectors(inputs, expected):
    assert permute(inputs) == tuple(int(x) for x in expected)


def test_permute_accepts_integers():
    assert permute([0, 1, 2, 3]) == permute(["0", "1", "2", "3"])


@pytest.mark.parametrize("size", [0, 3, 5])
def test_permute_rejects_wrong_width(size):
    with pytest.raises(ValueError):
        permute([0] * size)


def test_hash_no_pad_empty_is_zero():
    assert hash_no_pad([]) == 0


def test_hash_no_pad_single_group_fills_first_rate_slot():
    a, b, c = 7, 11, 13
    packed = a + (b << 64) + (c << 128)
    assert hash_no_pad([a, b, c]) == permute([0, packed, 0, 0])[0]


def test_hash_no_pad_zero_input_matches_zero_permutation():
    assert hash_no_pad([0]) == int(PERMUTATION_CASES[0][1][0])


def test_hash_no_pad_second_block_keeps_untouched_slots():
    first_block = list(range(1, 10))
    state = list(permute([
        0,
        1 + (2 << 64) + (3 << 128),
        4 + (5 << 64) + (6 << 128),
        7 + (8 << 64) + (9 << 128),
    ]))
    state[1] = 10
    assert hash_no_pad(first_block + [10]) == permute(state)[0]


def test_hash_or_noop_packs_short_inputs():
    assert hash_or_noop([]) == 0
    assert hash_or_noop([5]) == 5
    assert hash_or_noop([1, 2]) == 1 + 2 * 2**64
    assert hash_or_noop([1, 2, 3]) == 1 + 2 * 2**64 + 3 * 2**128


def test_hash_or_noop_hashes_long_inputs():
    values = [1, 2, 3, 4]
    assert hash_or_noop(values) == hash_no_pad(values)


def test_two_to_one_uses_last_slots():
    assert two_to_one(2, 3) == permute([0, 0, 2, 3])[0]


def test_two_to_one_is_order_sensitive():
    assert two_to_one(1, 2) != two_to_one(2, 1)


def test_to_vec_chunk_sizes():
    chunks = to_vec(MODULUS - 1)
    assert len(chunks) == 5
    assert all(chunk < 2**56 for chunk in chunks[:4])
    assert chunks[4] < 2**30


def test_to_vec_small_value():
    assert to_vec(5) == [5, 0, 0, 0, 0]


@given(st.integers(min_value=0, max_value=MODULUS - 1))
def test_to_vec_round_trip(value):
    chunks = to_vec(value)
    assert sum(chunk << (56 * i) for i, chunk in enumerate(chunks)) == value