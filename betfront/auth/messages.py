"""User-facing texts of the auth form."""

from __future__ import annotations

from betfront.auth.mode import Mode

MISSING_FIELDS = "Пожалуйста, заполните все обязательные поля"
INVALID_EMAIL = "Пожалуйста, введите корректный email"
WEAK_PASSWORD = "Пароль должен содержать минимум 8 символов"
PASSWORD_MISMATCH = "Пароли не совпадают"
AGREEMENT_REQUIRED = "Необходимо принять условия соглашения для продолжения регистрации"

REQUEST_FAILED = "Ошибка при запросе"
TRANSPORT_FAILED = "Произошла ошибка при обработке запроса"

SUCCESS = {
    Mode.LOGIN: "Вход выполнен успешно!",
    Mode.REGISTER: "Регистрация успешно завершена!",
}

TITLE = {Mode.LOGIN: "Вход", Mode.REGISTER: "Регистрация"}
TOGGLE_PROMPT = {Mode.LOGIN: "Еще нет аккаунта?", Mode.REGISTER: "Уже зарегистрированы?"}
TOGGLE_LABEL = {Mode.LOGIN: "Регистрация", Mode.REGISTER: "Войти"}
SUBMIT_LABEL = {Mode.LOGIN: "ВОЙТИ", Mode.REGISTER: "РЕГИСТРАЦИЯ"}
LOADING_LABEL = "ЗАГРУЗКА..."
GOOGLE_LABEL = {
    Mode.LOGIN: "Вход через аккаунт Google",
    Mode.REGISTER: "Регистрация через Google",
}

EMAIL_PLACEHOLDER = "Email *"
PASSWORD_PLACEHOLDER = "Пароль *"
CONFIRM_PLACEHOLDER = "Подтвердите пароль *"
SHOW_PASSWORD = "Показать пароль"
HIDE_PASSWORD = "Скрыть пароль"
AGREEMENT_LABEL = "Я прочитал и принял соглашение:"
AGREEMENT_LINK = "Договор о предоставлении услуг"
FORGOT_PASSWORD = "Забыли пароль?"
DIVIDER = "или"
