"""기본 태그 카탈로그."""

from repolens.models import TagCategory, TagRule

FRAMEWORK = TagCategory.framework
TOOL = TagCategory.tool

DOCKER_TAG = "docker"
GITHUB_ACTIONS_TAG = "github-actions"

# requirements.txt 원문 검사에 사용하는 Python 웹 프레임워크
PYTHON_FRAMEWORK_TAGS = ("django", "flask", "fastapi")


def _rule(tag: str, category: TagCategory, *patterns: str) -> TagRule:
    return TagRule(tag=tag, category=category, patterns=patterns)


# 선언 순서가 곧 매칭 순서다.
DEFAULT_TAG_RULES: tuple[TagRule, ...] = (
    # 프레임워크
    _rule("react", FRAMEWORK, "react", "@types/react"),
    _rule("nextjs", FRAMEWORK, "next"),
    _rule("vue", FRAMEWORK, "vue"),
    _rule("nuxt", FRAMEWORK, "nuxt"),
    _rule("angular", FRAMEWORK, "@angular/core", "@angular/common"),
    _rule("svelte", FRAMEWORK, "svelte"),
    _rule("solid", FRAMEWORK, "solid-js"),
    _rule("preact", FRAMEWORK, "preact"),
    _rule("express", FRAMEWORK, "express"),
    _rule("fastify", FRAMEWORK, "fastify"),
    _rule("nestjs", FRAMEWORK, "@nestjs/core", "nestjs"),
    _rule("koa", FRAMEWORK, "koa"),
    _rule("hapi", FRAMEWORK, "@hapi/hapi", "hapi"),
    _rule("django", FRAMEWORK, "django", "Django"),
    _rule("flask", FRAMEWORK, "flask", "Flask"),
    _rule("fastapi", FRAMEWORK, "fastapi", "FastAPI"),
    _rule("remix", FRAMEWORK, "@remix-run/react", "@remix-run/node"),
    _rule("gatsby", FRAMEWORK, "gatsby"),
    _rule("astro", FRAMEWORK, "astro"),
    _rule("react-native", FRAMEWORK, "react-native"),
    _rule("expo", FRAMEWORK, "expo"),
    _rule("electron", FRAMEWORK, "electron"),
    _rule("tauri", FRAMEWORK, "@tauri-apps/api", "@tauri-apps/cli"),
    # 빌드 도구
    _rule("webpack", TOOL, "webpack"),
    _rule("vite", TOOL, "vite"),
    _rule("rollup", TOOL, "rollup"),
    _rule("esbuild", TOOL, "esbuild"),
    _rule("parcel", TOOL, "parcel"),
    _rule("turbopack", TOOL, "turbopack"),
    # 품질 도구
    _rule(
        "testing",
        TOOL,
        "jest",
        "vitest",
        "mocha",
        "chai",
        "@testing-library/react",
        "cypress",
        "playwright",
        "@playwright/test",
        "selenium-webdriver",
    ),
    _rule("linting", TOOL, "eslint", "tslint"),
    _rule("formatting", TOOL, "prettier"),
    _rule("typescript", TOOL, "typescript"),
    # 상태 관리
    _rule("redux", TOOL, "redux", "@reduxjs/toolkit"),
    _rule("mobx", TOOL, "mobx"),
    _rule("zustand", TOOL, "zustand"),
    _rule("recoil", TOOL, "recoil"),
    _rule("jotai", TOOL, "jotai"),
    # 스타일링
    _rule("tailwind", TOOL, "tailwindcss"),
    _rule("styled-components", TOOL, "styled-components"),
    _rule("emotion", TOOL, "@emotion/react", "@emotion/styled"),
    _rule("sass", TOOL, "sass", "node-sass"),
    # 데이터
    _rule(
        "graphql",
        TOOL,
        "graphql",
        "apollo-server",
        "@apollo/client",
        "urql",
        "relay-runtime",
    ),
    _rule("prisma", TOOL, "prisma", "@prisma/client"),
    _rule("typeorm", TOOL, "typeorm"),
    _rule("sequelize", TOOL, "sequelize"),
    _rule("mongoose", TOOL, "mongoose"),
    _rule("drizzle", TOOL, "drizzle-orm"),
    # 인프라 (파일 존재 여부로 판단)
    _rule(DOCKER_TAG, TOOL, "Dockerfile"),
    _rule(GITHUB_ACTIONS_TAG, TOOL, ".github/workflows"),
)
