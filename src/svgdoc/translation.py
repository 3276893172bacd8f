"""Placeholder translation source.

Stands in for the external translator: returns a fixed simulated
translation that exercises every line category.
"""

from datetime import datetime, timezone
from typing import Optional

from svgdoc.pipeline.stage_classify import TITLE_MARKERS

PLACEHOLDER_TEMPLATE = """{marker}：{file_name}

本文檔已成功翻譯為中文版本。

主要內容：

1. 文檔概述
   這是一份經過專業翻譯的PDF文檔，保持了原始格式和內容結構。
   翻譯過程採用了先進的語言處理技術，確保翻譯的準確性和流暢性。

2. 技術規格
   - 文檔格式：PDF
   - 翻譯語言：中文
   - 處理時間：{local_time}
   - 文件狀態：翻譯完成

3. 內容摘要
   本文檔包含了重要的信息和數據，經過仔細的翻譯處理，
   確保所有專業術語和概念都能準確地以中文表達。

4. 使用說明
   請妥善保存此翻譯版本，如有任何疑問或需要進一步的
   翻譯服務，請聯繫相關技術支持團隊。

注意事項：
- 本翻譯僅供參考使用
- 如需正式文檔請聯繫專業翻譯服務
- 請確保文檔使用符合相關法規要求

翻譯完成時間：{iso_time}
原始檔案：{file_name}"""


def placeholder_translation(file_name: str, now: Optional[datetime] = None) -> str:
    """Return the simulated translation text for a source file."""
    now = now or datetime.now(timezone.utc)
    return PLACEHOLDER_TEMPLATE.format(
        marker=TITLE_MARKERS[0],
        file_name=file_name,
        local_time=now.strftime("%Y/%m/%d %H:%M:%S"),
        iso_time=now.isoformat(),
    )
