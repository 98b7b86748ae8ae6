"""
Bedtime Story Service
아이 맞춤 동화 생성 및 음성 낭독 백엔드
"""
