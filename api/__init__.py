"""
API 層

只負責 HTTP：驗證輸入、呼叫 GameService、序列化輸出
- play：POST /play
- results：GET /results、GET /results/summary
"""
