"""Handlebars template of the playable game page.

Rendered by `blueprint_forge.emitter.code`. Context keys: title, theme,
environment, description, color_dark, color_mid, color_light, objectives
(list of {number, label}) and config (pre-escaped JSON, inserted raw).

The script mirrors `GameSimulation`: same key bindings, same step order,
same constants (read from the embedded config).
"""

GAME_TEMPLATE = """<!DOCTYPE html>
<html lang="fr">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{title}}</title>
<style>
  :root { --dark: {{color_dark}}; --mid: {{color_mid}}; --light: {{color_light}}; }
  * { box-sizing: border-box; margin: 0; padding: 0; }
  body {
    min-height: 100vh;
    font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
    color: #f4f7ff;
    background: radial-gradient(circle at top, var(--mid), var(--dark) 70%);
    display: flex;
    flex-direction: column;
    align-items: center;
    gap: 16px;
    padding: 20px;
  }
  header { width: 100%; max-width: 960px; display: grid; gap: 8px; }
  header h1 { font-size: 1.6rem; color: var(--light); }
  header .theme { font-size: 0.85rem; text-transform: uppercase; letter-spacing: 0.12em; opacity: 0.8; }
  header .environment, header .pitch { font-size: 0.95rem; opacity: 0.9; }
  .objectives { list-style: none; display: flex; flex-wrap: wrap; gap: 8px; }
  .chip {
    display: flex; align-items: center; gap: 8px;
    padding: 6px 12px; border-radius: 999px;
    background: rgba(0, 0, 0, 0.35); border: 1px solid var(--light);
    font-size: 0.85rem;
  }
  .chip span { font-weight: 700; color: var(--light); }
  .stage-wrap { position: relative; width: 100%; max-width: 960px; }
  canvas {
    display: block; width: 100%; height: auto;
    border-radius: 18px; border: 1px solid rgba(255, 255, 255, 0.15);
    box-shadow: 0 24px 60px rgba(0, 0, 0, 0.45);
  }
  #overlay {
    position: absolute; inset: 0;
    display: none; align-items: center; justify-content: center;
    border-radius: 18px; background: rgba(0, 0, 0, 0.55);
    font-size: 1.5rem; font-weight: 700; text-align: center; padding: 24px;
  }
  #overlay[data-state='victory'] { display: flex; color: var(--light); }
  #overlay[data-state='game_over'] { display: flex; color: #ff8a8a; }
  footer { font-size: 0.8rem; opacity: 0.7; }
</style>
</head>
<body>
<header>
  <p class="theme">{{theme}}</p>
  <h1>{{title}}</h1>
  <p class="environment">{{environment}}</p>
  <p class="pitch">{{description}}</p>
  <ul class="objectives">
    {{#each objectives}}<li class="chip"><span>{{number}}</span>{{label}}</li>{{/each}}
  </ul>
</header>
<div class="stage-wrap">
  <canvas id="stage" width="960" height="600"></canvas>
  <div id="overlay" data-state="playing"></div>
</div>
<footer>Flèches, WASD ou ZQSD pour se déplacer. R pour recommencer.</footer>
<script>
(function () {
  const CONFIG = {{{config}}};
  const P = CONFIG.physics;
  const BINDINGS = {
    up: ['ArrowUp', 'KeyW', 'KeyZ'],
    down: ['ArrowDown', 'KeyS'],
    left: ['ArrowLeft', 'KeyA', 'KeyQ'],
    right: ['ArrowRight', 'KeyD']
  };
  const canvas = document.getElementById('stage');
  const ctx = canvas.getContext('2d');
  const overlay = document.getElementById('overlay');
  const keys = new Set();

  let state = 'playing';
  let time = 0;
  let player = null;
  let pickups = [];
  let enemies = [];

  function clamp(value, low, high) {
    return Math.max(low, Math.min(high, value));
  }

  function pressed(direction) {
    return BINDINGS[direction].some(function (code) { return keys.has(code); });
  }

  function setState(next) {
    state = next;
    overlay.dataset.state = next;
    if (next === 'victory') overlay.textContent = CONFIG.messages.victory;
    else if (next === 'game_over') overlay.textContent = CONFIG.messages.gameOver;
    else overlay.textContent = '';
  }

  function reset() {
    time = 0;
    player = { x: CONFIG.player.x, y: CONFIG.player.y };
    pickups = CONFIG.pickups.map(function (p) {
      return { label: p.label, x: p.x, y: p.y, collected: false };
    });
    enemies = CONFIG.enemies.map(function (e) {
      return {
        label: e.label, baseX: e.x, baseY: e.y, x: e.x, y: e.y,
        speed: e.speed, swayFrequency: e.swayFrequency, phase: e.phase
      };
    });
    setState(pickups.length === 0 ? 'victory' : 'playing');
  }

  function teleport(x, y) {
    player.x = clamp(x, P.playerRadius, P.width - P.playerRadius);
    player.y = clamp(y, P.playerRadius, P.height - P.playerRadius);
  }

  function movePlayer(dt) {
    const vx = (pressed('right') ? 1 : 0) - (pressed('left') ? 1 : 0);
    const vy = (pressed('down') ? 1 : 0) - (pressed('up') ? 1 : 0);
    const length = Math.hypot(vx, vy);
    if (length === 0) return;
    const distance = P.playerSpeed * dt / length;
    teleport(player.x + vx * distance, player.y + vy * distance);
  }

  function collectPickups() {
    pickups.forEach(function (p) {
      if (!p.collected && Math.hypot(player.x - p.x, player.y - p.y) < P.playerRadius + P.pickupRadius) {
        p.collected = true;
      }
    });
    if (collectedCount() === pickups.length) setState('victory');
  }

  function moveEnemies(dt) {
    if (state === 'game_over') return;
    const r = P.enemyRadius;
    const direction = state === 'victory' ? -P.retreatFactor : 1;
    enemies.forEach(function (e) {
      const dx = player.x - e.baseX;
      const dy = player.y - e.baseY;
      const dist = Math.hypot(dx, dy) || 1;
      const ux = dx / dist;
      const uy = dy / dist;
      e.baseX = clamp(e.baseX + ux * e.speed * direction * dt, r, P.width - r);
      e.baseY = clamp(e.baseY + uy * e.speed * direction * dt, r, P.height - r);
      const sway = Math.sin(time * e.swayFrequency + e.phase) * P.swayAmplitude;
      e.x = clamp(e.baseX - uy * sway, r, P.width - r);
      e.y = clamp(e.baseY + ux * sway, r, P.height - r);
      if (state === 'playing' && Math.hypot(player.x - e.x, player.y - e.y) < P.playerRadius + r) {
        setState('game_over');
      }
    });
  }

  function collectedCount() {
    return pickups.filter(function (p) { return p.collected; }).length;
  }

  function step(dt) {
    time += dt;
    if (state !== 'game_over') movePlayer(dt);
    if (state === 'playing') collectPickups();
    moveEnemies(dt);
    return state;
  }

  function drawBackground() {
    const gradient = ctx.createLinearGradient(0, 0, 0, P.height);
    gradient.addColorStop(0, CONFIG.palette[0]);
    gradient.addColorStop(1, CONFIG.palette[1]);
    ctx.fillStyle = gradient;
    ctx.fillRect(0, 0, P.width, P.height);

    const count = CONFIG.keywords.length;
    ctx.font = '600 13px system-ui, sans-serif';
    ctx.textAlign = 'center';
    CONFIG.keywords.forEach(function (word, i) {
      const angle = time * 0.12 + (i / count) * Math.PI * 2;
      const radius = 140 + (i % 3) * 60;
      const x = P.width / 2 + Math.cos(angle) * radius;
      const y = P.height / 2 + Math.sin(angle) * radius * 0.6;
      ctx.globalAlpha = 0.22;
      ctx.fillStyle = CONFIG.palette[i % 3];
      ctx.beginPath();
      ctx.arc(x, y, 26 + (i % 2) * 10, 0, Math.PI * 2);
      ctx.fill();
      ctx.globalAlpha = 0.45;
      ctx.fillStyle = CONFIG.palette[2];
      ctx.fillText(word, x, y + 4);
    });
    ctx.globalAlpha = 1;
  }

  function drawPickups() {
    pickups.forEach(function (p, i) {
      const pulse = 1 + Math.sin(time * 4 + i) * 0.15;
      const size = P.pickupRadius * pulse;
      ctx.save();
      ctx.globalAlpha = p.collected ? 0.25 : 1;
      ctx.translate(p.x, p.y);
      ctx.rotate(time * 2 + i);
      ctx.fillStyle = CONFIG.palette[2];
      ctx.shadowColor = CONFIG.palette[2];
      ctx.shadowBlur = p.collected ? 0 : 16;
      ctx.fillRect(-size, -size, size * 2, size * 2);
      ctx.restore();
      ctx.globalAlpha = p.collected ? 0.35 : 0.9;
      ctx.fillStyle = '#ffffff';
      ctx.font = '12px system-ui, sans-serif';
      ctx.textAlign = 'center';
      ctx.fillText(p.label.slice(0, 28), p.x, p.y + P.pickupRadius + 18);
      ctx.globalAlpha = 1;
    });
  }

  function drawEnemies() {
    enemies.forEach(function (e) {
      ctx.beginPath();
      ctx.arc(e.x, e.y, P.enemyRadius, 0, Math.PI * 2);
      ctx.fillStyle = state === 'victory' ? CONFIG.palette[1] : '#ff5d6c';
      ctx.fill();
      ctx.lineWidth = 2;
      ctx.strokeStyle = CONFIG.palette[2];
      ctx.stroke();
      ctx.fillStyle = '#ffffff';
      ctx.font = '11px system-ui, sans-serif';
      ctx.textAlign = 'center';
      ctx.fillText(e.label.slice(0, 20), e.x, e.y - P.enemyRadius - 6);
    });
  }

  function drawPlayer() {
    ctx.beginPath();
    ctx.arc(player.x, player.y, P.playerRadius, 0, Math.PI * 2);
    ctx.fillStyle = CONFIG.palette[2];
    ctx.shadowColor = CONFIG.palette[2];
    ctx.shadowBlur = 24;
    ctx.fill();
    ctx.shadowBlur = 0;
  }

  function drawProgress() {
    const threats = state === 'playing' ? enemies.length : 0;
    ctx.fillStyle = 'rgba(0, 0, 0, 0.45)';
    ctx.fillRect(12, P.height - 40, P.width - 24, 28);
    ctx.fillStyle = '#ffffff';
    ctx.font = '13px system-ui, sans-serif';
    ctx.textAlign = 'left';
    ctx.fillText(
      'Collectés : ' + collectedCount() + '/' + pickups.length +
      '  •  Menaces actives : ' + threats +
      '  •  ' + CONFIG.environmentSnippet,
      24, P.height - 21
    );
  }

  function render() {
    drawBackground();
    drawPickups();
    drawEnemies();
    drawPlayer();
    drawProgress();
  }

  window.addEventListener('keydown', function (event) {
    keys.add(event.code);
    if (event.code.indexOf('Arrow') === 0) event.preventDefault();
    if (event.code === 'KeyR' && state === 'game_over') reset();
  });
  window.addEventListener('keyup', function (event) {
    keys.delete(event.code);
  });
  window.addEventListener('blur', function () {
    keys.clear();
  });

  let last = performance.now();
  function frame(now) {
    const dt = Math.min((now - last) / 1000, 0.05);
    last = now;
    step(dt);
    render();
    requestAnimationFrame(frame);
  }

  window.blueprintGame = {
    step: step,
    teleport: teleport,
    reset: reset,
    state: function () { return state; },
    pickups: function () { return pickups; },
    enemies: function () { return enemies; }
  };

  reset();
  requestAnimationFrame(frame);
})();
</script>
</body>
</html>
"""
