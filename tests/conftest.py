"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample VectorDrawables

MINIMAL_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp" android:height="24dp"
    android:viewportWidth="24" android:viewportHeight="24">
    <path android:pathData="M0 0L24 24" android:fillColor="#FF112233"/>
</vector>'''

ICON_VD = '''<?xml version="1.0" encoding="utf-8"?>
<!-- home icon -->
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:name="home"
    android:width="24dp" android:height="24dp"
    android:viewportWidth="24.0" android:viewportHeight="24.0"
    android:alpha="0.8"
    android:tint="?attr/colorControlNormal">
    <group android:name="body" android:translateX="2" android:rotation="45" android:pivotX="12">
        <path android:name="roof"
            android:pathData="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"
            android:fillColor="#80FF0000"
            android:fillType="evenOdd"/>
        <path android:pathData="M4 4h16"
            android:strokeColor="blue"
            android:strokeAlpha="0.3"
            android:strokeWidth="2"
            android:strokeLineCap="round"
            android:strokeLineJoin="bevel"
            android:strokeMiterLimit="4"/>
    </group>
</vector>'''

GRADIENT_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:aapt="http://schemas.android.com/aapt"
    android:viewportWidth="100" android:viewportHeight="100">
    <path android:pathData="M0 0h100v100h-100z">
        <aapt:attr name="android:fillColor">
            <gradient android:type="linear"
                android:startX="0" android:startY="0" android:endX="100" android:endY="0"
                android:startColor="#FFFF0000" android:endColor="#800000FF"
                android:tileMode="clamp"/>
        </aapt:attr>
    </path>
    <path android:pathData="M50 50m-40 0a40 40 0 1 0 80 0a40 40 0 1 0-80 0"
        android:fillAlpha="0.5">
        <aapt:attr name="android:fillColor">
            <gradient android:type="radial"
                android:centerX="50" android:centerY="50" android:gradientRadius="40">
                <item android:offset="0" android:color="#FFFFFFFF"/>
                <item android:offset="0.6" android:color="#40000000"/>
                <item android:offset="1" android:color="black"/>
            </gradient>
        </aapt:attr>
    </path>
</vector>'''

CLIP_VD = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="24" android:viewportHeight="24">
    <path android:pathData="M0 0h1" android:fillColor="#000"/>
    <clip-path android:pathData="M0 0h12v12h-12z"/>
    <path android:pathData="M1 1h2" android:fillColor="#111"/>
    <group>
        <path android:pathData="M2 2h3" android:fillColor="#222"/>
        <clip-path android:pathData="M0 0h6v6h-6z"/>
        <path android:pathData="M3 3h4" android:fillColor="#333"/>
    </group>
    <path android:pathData="M4 4h5" android:fillColor="#444"/>
</vector>'''


@pytest.fixture
def minimal_vd() -> str:
    return MINIMAL_VD


@pytest.fixture
def icon_vd() -> str:
    return ICON_VD


@pytest.fixture
def gradient_vd() -> str:
    return GRADIENT_VD


@pytest.fixture
def clip_vd() -> str:
    return CLIP_VD
