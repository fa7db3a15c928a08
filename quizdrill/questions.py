"""The question bank and the multiple-choice question type."""

from __future__ import annotations

import dataclasses
import random
from collections.abc import Sequence
from dataclasses import dataclass

LETTERS: tuple[str, ...] = ("A", "B", "C", "D")


@dataclass(frozen=True)
class Question:
    """A prompt with four choices, one of which is the answer."""

    prompt: str
    choices: tuple[str, ...]
    answer: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "choices", tuple(self.choices))
        if len(self.choices) != len(LETTERS):
            raise ValueError(
                f"a question needs exactly {len(LETTERS)} choices, "
                f"got {len(self.choices)}"
            )
        if self.answer not in self.choices:
            raise ValueError(f"answer {self.answer!r} is not among the choices")

    def correct_letter(self) -> str:
        """Return the letter under which the answer is listed."""
        return LETTERS[self.choices.index(self.answer)]

    def choice_for(self, letter: str) -> str:
        """Return the text of the choice listed under ``letter``."""
        try:
            return self.choices[LETTERS.index(letter)]
        except ValueError:
            raise ValueError(f"unknown choice letter {letter!r}") from None

    def with_shuffled_choices(self, rng: random.Random) -> Question:
        """Return a copy whose choices are put in a random order."""
        choices = list(self.choices)
        rng.shuffle(choices)
        return dataclasses.replace(self, choices=tuple(choices))


def _pick(prompt: str, choices: Sequence[str], answer_index: int) -> Question:
    """Build a question whose answer is the choice at ``answer_index``."""
    return Question(prompt, tuple(choices), choices[answer_index])


def _table(
    heading: str, rows: Sequence[Sequence[str]], trailing_newline: bool = False
) -> str:
    """Draw a boxed grid of cells under a heading line."""
    drawn = ["|" + "|".join(cells) + "|" for cells in rows]
    rule = " " + "-" * (len(drawn[0]) - 2)
    lines = [heading, rule]
    for row in drawn:
        lines.extend((row, rule))
    text = "\n".join(lines)
    return text + "\n" if trailing_newline else text


def _crosses(
    heading: str,
    tops: Sequence[str],
    middles: Sequence[Sequence[str]],
    gap: int,
    bottoms: Sequence[str] = (),
) -> str:
    """Draw cross-shaped groups of cells side by side under a heading."""
    pad = " " * (len(middles[0][0]) + 1)
    sep = " " * gap

    def vertical(cells: Sequence[str]) -> str:
        return (sep + pad).join(f"{pad}|{cell}|" for cell in cells)

    lines = [heading, vertical(tops)]
    lines.append(sep.join("|" + "|".join(cells) + "|" for cells in middles))
    if bottoms:
        lines.append(vertical(bottoms))
    return "\n".join(lines)


def _workers(first: int, second: int) -> str:
    return f"Người thứ nhất cần {first} giờ, người thứ 2 cần {second} giờ\n"


def _series(*numbers: int) -> str:
    return " - ".join(str(n) for n in numbers) + "\n"


_FILL_QUOTED = 'Điền số thích hợp vào dấu "?"'
_DIAGRAM = "Cho sơ đồ hình vẽ dưới đây, tìm số phù hợp"
_FILL_BLANK = "Điền vào ô trống:"
_MISSING = "Điền số còn thiếu vào dãy số: "


def load_questions() -> list[Question]:
    """Return the full question bank in its fixed order."""
    return [
        _pick(
            "Sân vận động có 10.000 chỗ. "
            "Trừ 100 chỗ không bán vé, 20% số vé bán với giá nửa giá bình thường, "
            "còn lại bán đúng giá 2$. "
            "Hỏi số tiền thu được từ việc bán vé.",
            ["17820", "17900", "18900", "16800"],
            0,
        ),
        _pick(
            "1 Anh đi chợ bán trứng. "
            "Sáng anh ta bán được 2/3 số trứng, "
            "trưa bán 2/3 số trứng còn lại từ sáng, "
            "chiều bán 2/3 số còn lại từ trưa, "
            "cuối cùng anh ta còn 10 quả trứng. "
            "Hỏi số trứng anh ta mang đi bán.",
            ["120", "270", "230", "240"],
            1,
        ),
        _pick(
            "Có 3 con ngựa, "
            "1 con chạy 2p/vòng; 1 con chạy 3p/vòng; 1 con chạy 4p/vòng. "
            "Hỏi sau bao nhiêu phút thì 3 con gặp nhau. "
            "(không tính lúc xuất phát)?",
            ["2,5p", "2p", "1p", "12p"],
            3,
        ),
        _pick(
            "Tổng quỹ lương trả nhân viên là 6000$. "
            "Lương nhân viên cấp cao gấp đôi lương nhân viên bình thường. "
            "Có 4 nhân viên cấp cao và 2 nhân viên bình thường. "
            "Hỏi lương nhân viên bình thường bằng bao nhiêu?",
            ["1200", "2400", "1000", "2000"],
            0,
        ),
        _pick(
            "Có 1 khung thép hình chữ nhật rộng 6cm, dài 10cm, cao 8m. "
            "Hỏi bán kính tối đa của một ống tròn đặt trong khung thép "
            "là bao nhiêu.",
            ["3cm", "5cm", "8cm", "6cm"],
            0,
        ),
        _pick(
            "Một người đi xe đạp từ A đến B với vận tốc 12km/h. "
            "Nếu người đó đi với vận tốc 15km/h thì đến B sớm hơn được 1 giờ. "
            "Tính khoảng cách AB.",
            ["80", "70", "60", "65"],
            2,
        ),
        _pick(
            "Gọi A là diện tích tam giác tạo bởi 3 đường thẳng: "
            "Y = 2x + 3; Y = -1/2x + 3; Y = 1. "
            "B có giá trị là 24. So sánh A và B.",
            ["A>B", "A<B", "A=B", "Đáp án khác"],
            1,
        ),
        _pick(
            "Trong một đám đông 100 người, người ta đếm có "
            "70 người mặc áo vest, 85 người đeo ca vát, "
            "75 người đội mũ, và 80 người đi giầy. "
            "Hỏi ít nhất có bao nhiêu người mặc đủ áo vest, "
            "đeo ca vát đội mũ, và đi giầy?",
            ["10", "20", "30", "40"],
            0,
        ),
        _pick(
            "Khi trộn nguyên liệu xây một công trình, người ta dùng "
            "1/3 hỗn hợp là cát, 3/5 hỗn hợp là nước, và 12 kg sỏi. "
            "Hỏi tổng khối lượng hỗn hợp là bao kg "
            "(coi hỗn hợp trộn đều như nhau)?",
            ["170", "180", "210", "200"],
            1,
        ),
        _pick(
            "Một con ếch ở trong đáy một cái giếng sâu 12m, "
            "mỗi ngày nước trong giếng dâng lên 3m "
            "rồi lại rút xuống 2m vào ngày hôm sau (cứ liên tiếp như vậy). "
            "Hỏi sau mấy ngày thì con ếch có thể nhảy ra khỏi giếng.",
            ["7", "8", "9", "10"],
            3,
        ),
        _pick(
            "Hai người đánh 2 trang sách trong 5 phút. "
            "Hỏi cần bao nhiêu người để đánh hết 20 trang sách trong 10 phút?",
            [f"{n} người" for n in (20, 8, 10, 14)],
            2,
        ),
        _pick(
            "Có 2 cốc trong đó cốc A chứa 1 lít sữa, "
            "cốc B chứa 1 lít cà phê, đổ 1/10B vào A, "
            "sau đó đổ 1/10A vào B, "
            "tính tỉ lệ thể tích cà phê trong B?",
            ["9%", "90%", "90,1%", "90,91%"],
            2,
        ),
        _pick(
            "Ông A đi hướng bắc 15m, rồi đi hướng đông 30m, "
            "rồi đi hướng bắc 15m. "
            "Hỏi ông này cách vị trí ban đầu bao nhiêu m?",
            ["32,4", "42,4", "35,4", "45,4"],
            1,
        ),
        _pick(
            "Người A lau nhà hết 5h, người B lau nhà hết 6h. "
            "Hỏi khi cả người cùng lau nhà thì sẽ mất bao lâu?",
            [f"{t} giờ" for t in ("2.73", "2", "2.5", "3.1")],
            0,
        ),
        _pick(
            "Hai người cùng làm chung một công việc thì hoàn thành trong 4 giờ. "
            "Nếu mỗi người làm riêng, để hoàn thành công việc thì "
            "thời gian người thứ nhất ít hơn thời gian người thứ hai là 6 giờ. "
            "Hỏi nếu làm riêng thì mỗi người phải làm trong bao lâu "
            "để hoàn thành công việc.",
            [_workers(4, 10), _workers(6, 12), _workers(5, 11), _workers(8, 14)],
            1,
        ),
        _pick(
            "Số nào là số tiếp theo của dãy: " "4; 25; 100; 289; ...",
            ["525", "676", "425", "575"],
            1,
        ),
        _pick(
            "Số nào tiếp theo của dãy: " "5; 65; 765; ...",
            ["6565", "8765", "9865", "7565"],
            1,
        ),
        _pick(
            _MISSING + "17; 34; 51; 68; ... ; 102",
            ["65", "75", "85", "95"],
            2,
        ),
        _pick(
            _MISSING + "1; 5; 13; 29; ...",
            ["61", "65", "70", "75"],
            0,
        ),
        _pick(
            _MISSING + "1; 3; 7; 35; 41; ...",
            ["6", "205", "48", "287"],
            3,
        ),
        _pick(
            "Cho dãy: " + " - ".join(["A", "C", "F", "...", "O"]),
            ["B", "J", "D", "P"],
            1,
        ),
        _pick(
            "Cho dãy: " + " - ".join(["C", "F", "Z", "I", "..."]),
            ["Q", "R", "U", "W"],
            2,
        ),
        _pick(
            _table(
                _FILL_BLANK,
                [
                    (" 71 ", " 68 ", " ↓  "),
                    (" 23 ", "    ", " 3  "),
                    (" 26 ", "  ? ", " 11 "),
                ],
                trailing_newline=True,
            ),
            ["35", "33", "10", "8"],
            3,
        ),
        _pick(
            _table(
                _FILL_BLANK,
                [
                    (" -3 ", "  ? ", "-10 "),
                    (" 2  ", "    ", " ↓  "),
                    (" 10 ", " 5  ", " 1  "),
                ],
            ),
            ["-8", "-15", "2", "10"],
            1,
        ),
        _pick(
            _table(
                "Tìm số phù hợp vào dấu ?",
                [
                    (" 102 ", " 120 ", " 212 "),
                    (" 212 ", "  ?  ", " 318 "),
                    (" 203 ", " 140 ", " 323 "),
                ],
            ),
            ["116", "112", "88", "56"],
            0,
        ),
        _pick(
            _table(
                "Cho dữ liệu sau đây:",
                [
                    ("  3  ", "  7  ", " 10  ", " 13  ", "  ?  "),
                    ("  4  ", " 12  ", " 84  ", " 840 ", "  ?  "),
                ],
            ),
            [f"{a} và {b}" for a, b in ((14, 9900), (16, 10920), (15, 12300), (16, 18520))],
            1,
        ),
        _pick(
            "\n".join(
                [
                    "Dấu ? là chữ nào?",
                    " " * 5 + "A" + " " * 5,
                    " " * 2 + "F" + " " * 5 + "J" + " " * 2,
                    " " * 3 + "?" + " " * 3 + "C ",
                ]
            ),
            ["E", "I", "J", "M"],
            1,
        ),
        _pick(
            _crosses(
                _FILL_QUOTED,
                ["7", "2", "5"],
                [("9", "2", "8"), ("7", "8", "4"), ("6", "?", "9")],
                gap=2,
            ),
            ["4", "5", "6", "7"],
            0,
        ),
        _pick(
            _table(
                _FILL_QUOTED,
                [
                    ("    ", "    ", "    ", " 14 ", "    "),
                    ("    ", " 22 ", "    ", "    ", "    "),
                    ("    ", "    ", "    ", " 34 ", "    "),
                    (" 41 ", "    ", "    ", "    ", "    "),
                    ("    ", "    ", " 53 ", "    ", " ?  "),
                ],
            ),
            ["55", "66", "51", "33"],
            2,
        ),
        _pick(
            "\n".join(
                [
                    _DIAGRAM,
                    " " * 11 + "3",
                    " " * 7 + "?" + " " * 7 + "6",
                    " " * 4 + "37" + " " * 12 + "8",
                    " " * 6 + "25" + " " * 6 + "12",
                    " " * 10 + "17",
                ]
            ),
            ["54", "55", "57", "59"],
            2,
        ),
        _pick(
            _crosses(
                _DIAGRAM,
                ["27", "14", "21"],
                [("63", " 2", "59"), ("66", " 4", "42"), ("39", " ?", "72")],
                gap=5,
                bottoms=["34", "13", "16"],
            ),
            ["7", "9", "11", "13"],
            0,
        ),
        _pick(
            _table(
                _FILL_QUOTED,
                [
                    (" 50 ", " 51 ", " 49 ", " 52 ", " 48 "),
                    (" 46 ", " 47 ", " 45 ", " 48 ", " 44 "),
                    (" 49 ", " 50 ", "    ", " 51 ", "    "),
                    (" 47 ", "    ", " 46 ", "    ", " 45 "),
                    (" 48 ", "    ", " 47 ", " 50 ", " 46 "),
                ],
            ),
            [
                _series(49, 47, 49, 48, 48),
                _series(46, 48, 48, 49, 49),
                _series(49, 48, 48, 49, 47),
                _series(48, 47, 48, 49, 49),
            ],
            3,
        ),
    ]