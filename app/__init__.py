"""
전문가 레벨/랭킹 API 서버
"""
