from PIL import Image

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader


def save_image_as_a4_pdf(
    img: Image.Image,
    out_pdf_path: str,
    margin_mm: float = 15.0,   # A4余白
):
    """
    PIL.Image を A4 1ページのPDFとして保存する。
    画像は縦横比を保って中央配置。RGBA は白背景に合成してから貼る。
    """
    page_w, page_h = A4  # pt
    margin = margin_mm * mm

    if img.mode == "RGBA":
        flat = Image.new("RGB", img.size, (255, 255, 255))
        flat.paste(img, mask=img.getchannel("A"))
        img = flat

    c = canvas.Canvas(out_pdf_path, pagesize=A4)

    img_w_px, img_h_px = img.size

    # PDF上で使える最大サイズ（pt）
    max_w = page_w - margin * 2
    max_h = page_h - margin * 2

    # px → pt のスケール（縦横比維持）
    scale = min(max_w / img_w_px, max_h / img_h_px)

    draw_w = img_w_px * scale
    draw_h = img_h_px * scale

    x = (page_w - draw_w) / 2
    y = (page_h - draw_h) / 2

    c.drawImage(
        ImageReader(img),
        x, y,
        width=draw_w,
        height=draw_h,
        preserveAspectRatio=True,
    )

    c.showPage()
    c.save()


def export_canvas(cnv, out_path: str, pdf_path: str | None = None) -> None:
    """
    Canvas を画像ファイル（と任意で A4 PDF）に書き出す。
    失敗したら SystemExit（非ゼロ終了）。リトライはしない。
    """
    try:
        cnv.save(out_path)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Failed to save {out_path}: {e}") from e
    print(f"Saved: {out_path}")

    if pdf_path is None:
        return
    try:
        save_image_as_a4_pdf(cnv.buffer, pdf_path, margin_mm=15.0)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Failed to save {pdf_path}: {e}") from e
    print(f"Saved A4 PDF: {pdf_path}")
