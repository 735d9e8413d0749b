"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- GameService：回合評估與 Result Log
- Exceptions：遊戲異常
- Logging：應用啟動時的 logging 設定
"""
